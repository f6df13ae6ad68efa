"""
core/query/services - 서비스별 조회 함수

각 함수는 (client, identifier) -> payload | None 형태이며,
찾으면 JSON 직렬화 가능한 레코드를, 없으면 None을 반환합니다.
"""
