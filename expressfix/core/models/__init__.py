"""
Models shared across the API and services.

- domain: enums describing review tools, formats and notification kinds
- io: request and response schemas
"""
