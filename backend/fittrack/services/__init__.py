"""Glue between stored rows and the pure scoring core."""
