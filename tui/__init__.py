"""
tui - 전체 화면 대시보드

state/    순수 위젯 상태 (리스트, 뷰포트, 모달, 섹션, 검색 프롬프트)
pages.py  페이지 enum과 페이지별 정의
router.py 네비게이션 상태 머신 (키 라우팅, 이펙트 생성)
render.py rich 렌더러
app.py    Textual 앱 (이벤트 루프, 워커, 터미널 핸드오프)
"""
