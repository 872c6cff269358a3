"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Repositories bind BaseRepository to a model and run inside the caller's session.
"""
