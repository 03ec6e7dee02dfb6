"""Tasks and the client that executes them."""
