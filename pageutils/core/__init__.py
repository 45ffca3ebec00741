"""Core primitives shared by the page helpers.

Modules in this package hold configuration, the host context that stands in
for browser globals, error types, validators, and the HTTP middleware used by
the inspection service.
"""
