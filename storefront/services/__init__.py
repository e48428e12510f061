"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Each service manages one aggregate root: it validates against repository
state, mutates or creates the entity, commits once, and returns a response schema.
Services call repositories for DB operations and may call other services
(e.g. ProductService uses AttachmentService for images).
"""
