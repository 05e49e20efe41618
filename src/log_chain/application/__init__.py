"""Application layer: handler chain, ports, and dispatch use cases."""
