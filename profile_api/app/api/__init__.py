"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and ``responses`` holds the
helpers every endpoint uses to build envelopes and error replies.
"""
