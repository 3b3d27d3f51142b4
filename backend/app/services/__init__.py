"""Business Logic Services.

This package contains all service modules that implement the core
business logic of the stays API.

Service Categories:
- Auth: Password hashing, session tokens, cookie sessions, ownership policy
- Media: Photo ingestion by link and by upload
- Store: User, place and booking persistence (user_service, place_service,
  booking_service)
"""
