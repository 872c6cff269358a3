"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate identifiers, call repositories, and hand plain results
(or Alert values) back to the routers.
"""
