"""HTTP service exposing the tools."""
