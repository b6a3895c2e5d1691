"""Host model: the hooks, REST server and native objects the adapter plugs into.

The real host owns dispatch, authentication and persistence. This package
models just enough of it in-process for messages, registries and factories
to have a concrete counterpart.
"""
