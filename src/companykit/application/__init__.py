"""Application layer: stateful components driven by the host UI."""
