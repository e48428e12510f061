"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each repository extends BaseRepository for the generic persistence gateway
(select / select_all / create / update / delete / save) and adds
entity-specific queries.
"""
