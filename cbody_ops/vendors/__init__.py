"""
vendors/__init__.py

External providers: object storage, the auth provider's REST API and the
video host. Build clients through vendors.factory.
"""
