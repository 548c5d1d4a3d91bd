"""
Service clients for AWS APIs.

Each client module declares a service's operation table on top of
``service_client.ServiceClient``, which provides the synchronous, callable
and async variants of every operation over a shared botocore transport.
"""
