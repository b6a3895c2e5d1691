"""Route option sets, routes and collections registered with the host's REST server.

Matching and dispatch stay with the host. These builders only produce the
option sets the host's ``register_route`` expects.
"""
