"""
Utils 패키지
입력 정리, 받침 판별, 로깅, 에러 처리 모듈들을 포함합니다.
"""
