"""
Server-side services: external service clients, the mocked review engines and
the aggregations behind the v1 API.
"""
