"""Ports and precedence policy shared by adapters and the composition root."""
