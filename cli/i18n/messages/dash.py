"""
cli/i18n/messages/dash.py - 대시보드 메시지

페이지 제목, 상태 표시줄 힌트, 모달, 리소스 Finder, 시작 오류 메시지의 번역.
"""

from __future__ import annotations

DASH_MESSAGES = {
    # =========================================================================
    # Header / Chrome
    # =========================================================================
    "profile": {
        "ko": "프로필",
        "en": "Profile",
    },
    "region": {
        "ko": "리전",
        "en": "Region",
    },
    "loading": {
        "ko": "불러오는 중...",
        "en": "Loading...",
    },
    "no_items": {
        "ko": "항목이 없습니다",
        "en": "No items",
    },
    "no_results": {
        "ko": "결과 없음",
        "en": "No results",
    },
    "unavailable": {
        "ko": "조회 실패",
        "en": "unavailable",
    },
    "current": {
        "ko": "현재",
        "en": "current",
    },
    # =========================================================================
    # Page Titles
    # =========================================================================
    "page_menu": {
        "ko": "메인 메뉴",
        "en": "Main Menu",
    },
    "page_instances": {
        "ko": "EC2 인스턴스",
        "en": "EC2 Instances",
    },
    "page_instance_detail": {
        "ko": "인스턴스 상세",
        "en": "Instance Detail",
    },
    "page_instance_security_groups": {
        "ko": "보안 그룹",
        "en": "Security Groups",
    },
    "page_instance_volumes": {
        "ko": "볼륨",
        "en": "Volumes",
    },
    "page_instance_interfaces": {
        "ko": "ENI",
        "en": "ENIs",
    },
    "page_security_groups": {
        "ko": "보안 그룹",
        "en": "Security Groups",
    },
    "page_security_group_rules": {
        "ko": "보안 그룹 규칙",
        "en": "Security Group Rules",
    },
    "page_security_group_instances": {
        "ko": "연결된 인스턴스",
        "en": "Attached Instances",
    },
    "page_network_interfaces": {
        "ko": "네트워크 인터페이스",
        "en": "Network Interfaces",
    },
    "page_load_balancers": {
        "ko": "로드 밸런서",
        "en": "Load Balancers",
    },
    "page_listeners": {
        "ko": "리스너",
        "en": "Listeners",
    },
    "page_target_groups": {
        "ko": "대상 그룹",
        "en": "Target Groups",
    },
    "page_targets": {
        "ko": "대상",
        "en": "Targets",
    },
    "page_dns_zones": {
        "ko": "호스팅 존",
        "en": "Hosted Zones",
    },
    "page_dns_records": {
        "ko": "DNS 레코드",
        "en": "DNS Records",
    },
    "page_db_instances": {
        "ko": "RDS 인스턴스",
        "en": "RDS Instances",
    },
    "page_db_snapshots": {
        "ko": "스냅샷",
        "en": "Snapshots",
    },
    "page_cache_clusters": {
        "ko": "ElastiCache 클러스터",
        "en": "ElastiCache Clusters",
    },
    "page_queues": {
        "ko": "SQS 큐",
        "en": "SQS Queues",
    },
    "page_queue_detail": {
        "ko": "큐 상세",
        "en": "Queue Detail",
    },
    "page_buckets": {
        "ko": "S3 버킷",
        "en": "S3 Buckets",
    },
    "page_objects": {
        "ko": "오브젝트",
        "en": "Objects",
    },
    "page_finder_results": {
        "ko": "리소스 검색 결과",
        "en": "Finder Results",
    },
    "page_json_detail": {
        "ko": "상세 (JSON)",
        "en": "Detail (JSON)",
    },
    # =========================================================================
    # Instance Detail
    # =========================================================================
    "col_field": {
        "ko": "항목",
        "en": "Field",
    },
    "col_value": {
        "ko": "값",
        "en": "Value",
    },
    "detail_basic": {
        "ko": "기본 정보",
        "en": "Basic",
    },
    "detail_network": {
        "ko": "네트워크",
        "en": "Network",
    },
    "detail_tags": {
        "ko": "태그",
        "en": "Tags",
    },
    # =========================================================================
    # Finder
    # =========================================================================
    "finder_title": {
        "ko": "리소스 검색",
        "en": "Resource Finder",
    },
    "finder_prompt": {
        "ko": "IP 주소 또는 도메인 입력 (ctrl+p / ctrl+n: 이전 입력)",
        "en": "Enter an IP address or domain (ctrl+p / ctrl+n: history)",
    },
    "finder_result": {
        "ko": "검색",
        "en": "Query",
    },
    "finder_unresolved": {
        "ko": "IP 해석 실패",
        "en": "unresolved",
    },
    "finder_total": {
        "ko": "총 {count}개 리소스",
        "en": "{count} resources found",
    },
    "finder_searching": {
        "ko": "검색 중...",
        "en": "Searching...",
    },
    "finder_instances": {
        "ko": "EC2 인스턴스",
        "en": "EC2 Instances",
    },
    "finder_network_interfaces": {
        "ko": "네트워크 인터페이스",
        "en": "Network Interfaces",
    },
    "finder_load_balancers": {
        "ko": "로드 밸런서",
        "en": "Load Balancers",
    },
    "finder_dns_records": {
        "ko": "DNS 레코드",
        "en": "DNS Records",
    },
    "finder_databases": {
        "ko": "RDS 인스턴스",
        "en": "RDS Instances",
    },
    "finder_caches": {
        "ko": "ElastiCache 클러스터",
        "en": "ElastiCache Clusters",
    },
    # =========================================================================
    # Search
    # =========================================================================
    "search_info": {
        "ko": "검색: {query} ({current}/{total})",
        "en": "Search: {query} ({current}/{total})",
    },
    "search_no_match": {
        "ko": "검색: {query} (일치 없음)",
        "en": "Search: {query} (no match)",
    },
    # =========================================================================
    # Status Bar Hints
    # =========================================================================
    "hint_menu": {
        "ko": "문자/enter:열기 P:프로필 R:리전 ?:도움말 Q:종료",
        "en": "letter/enter:open P:profile R:region ?:help Q:quit",
    },
    "hint_list": {
        "ko": "enter:상세 yy:복사 /:검색 r:새로고침 q:뒤로",
        "en": "enter:detail yy:copy /:search r:refresh q:back",
    },
    "hint_paging": {
        "ko": "]:다음 [:이전 0:처음",
        "en": "]:next [:prev 0:first",
    },
    "hint_viewport": {
        "ko": "j/k:스크롤 yy:복사 e:에디터 v:페이저 /:검색 q:뒤로",
        "en": "j/k:scroll yy:copy e:editor v:pager /:search q:back",
    },
    "hint_detail": {
        "ko": "tab:섹션 yy:값 복사 /:검색 q:뒤로",
        "en": "tab:section yy:copy value /:search q:back",
    },
    "hint_finder": {
        "ko": "tab:섹션 enter:상세 yy:복사 /:검색 r:다시 검색 q:뒤로",
        "en": "tab:section enter:detail yy:copy /:search r:search again q:back",
    },
    "hint_select": {
        "ko": "enter:선택 /:필터 esc:취소",
        "en": "enter:select /:filter esc:cancel",
    },
    "hint_input": {
        "ko": "enter:확인 esc:취소",
        "en": "enter:submit esc:cancel",
    },
    "hint_message": {
        "ko": "enter / esc 로 닫기",
        "en": "Press enter / esc to close",
    },
    # =========================================================================
    # Modals
    # =========================================================================
    "modal_info": {
        "ko": "알림",
        "en": "Info",
    },
    "modal_error": {
        "ko": "오류",
        "en": "Error",
    },
    "modal_success": {
        "ko": "완료",
        "en": "Success",
    },
    "help_title": {
        "ko": "키 도움말",
        "en": "Key Help",
    },
    "help_body": {
        "ko": (
            "j/k, ↑/↓   이동\n"
            "g/G        처음/끝\n"
            "ctrl+u/d   페이지 이동\n"
            "enter      선택 / 상세\n"
            "yy         복사\n"
            "/  n  N    검색, 다음/이전 일치\n"
            "r          새로고침\n"
            "tab        다음 섹션\n"
            "e / v      에디터 / 페이저로 열기\n"
            "P / R      프로필 / 리전 전환\n"
            "q, esc     뒤로\n"
            "Q          종료"
        ),
        "en": (
            "j/k, ↑/↓   move\n"
            "g/G        top/bottom\n"
            "ctrl+u/d   page up/down\n"
            "enter      select / detail\n"
            "yy         copy\n"
            "/  n  N    search, next/prev match\n"
            "r          refresh\n"
            "tab        next section\n"
            "e / v      open in editor / pager\n"
            "P / R      switch profile / region\n"
            "q, esc     back\n"
            "Q          quit"
        ),
    },
    "select_profile": {
        "ko": "AWS 프로필 선택",
        "en": "Select AWS Profile",
    },
    "select_region": {
        "ko": "리전 선택",
        "en": "Select Region",
    },
    "error_title": {
        "ko": "오류",
        "en": "Error",
    },
    "copied": {
        "ko": "클립보드에 복사했습니다",
        "en": "Copied to clipboard",
    },
    "switched_profile": {
        "ko": "프로필을 {profile}(으)로 전환했습니다",
        "en": "Switched to profile {profile}",
    },
    "switched_region": {
        "ko": "리전을 {region}(으)로 전환했습니다",
        "en": "Switched to region {region}",
    },
    # =========================================================================
    # Startup
    # =========================================================================
    "startup_error": {
        "ko": "시작 실패: {error}",
        "en": "Startup failed: {error}",
    },
}
