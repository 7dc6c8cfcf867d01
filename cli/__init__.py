"""
cli - awsdash 명령줄 진입점과 다국어 메시지
"""
