"""JSON-RPC tool server exposing PDF tools to agent runtimes."""
