"""Kernel – errors and the permission catalog shared by every layer."""
