"""
패턴 설명 노트

데모 러너의 --info / --list 출력에 쓰이는 패턴별 요약, 장점, 단점, 구성 요소
"""

ABSTRACT_FACTORY_NOTES = {
    "key": "abstract_factory",
    "name": "Abstract Factory",
    "korean_name": "추상 팩토리 패턴",
    "category": "생성",
    "summary": "서로 관련된 객체군을 생성하는 인터페이스를 제공하는 패턴",
    "pros": [
        "관련 객체들이 같은 테마로 일관성 있게 생성됨",
        "클라이언트는 추상 타입만 사용하고 구체 구현은 팩토리에 위임",
        "새 팩토리 추가나 제품군 확장이 쉬움",
    ],
    "cons": [
        "클래스 수가 늘어나 구조가 복잡해짐",
        "추상 팩토리와 구체 팩토리를 준비하는 초기 작업이 번거로움",
    ],
    "participants": [
        "추상 팩토리 : 관련 제품들을 생성하는 메서드 집합 정의",
        "구체 팩토리 : 추상 팩토리 구현, 실제 객체 생성",
        "추상 제품 : 생성될 객체의 공통 인터페이스",
        "구체 제품 : 추상 제품의 구현체",
        "클라이언트 : 추상 팩토리로 객체를 생성하고 사용",
    ],
}

ADAPTER_NOTES = {
    "key": "adapter",
    "name": "Adapter",
    "korean_name": "어댑터 패턴",
    "category": "구조",
    "summary": "호환되지 않는 인터페이스를 가진 두 객체를 연결해 함께 동작하게 하는 패턴",
    "pros": [
        "기존 코드를 수정하지 않고 새 코드와 연동 가능",
        "기존 클래스를 재사용해 중복을 줄임",
        "새 인터페이스 추가가 쉬움",
    ],
    "cons": [
        "중간 계층이 생겨 코드 복잡도가 약간 증가",
        "어댑터를 거치는 만큼 호출 비용이 추가됨",
    ],
    "participants": [
        "타겟 : 클라이언트가 기대하는 인터페이스",
        "적응 대상 : 클라이언트가 직접 쓰기 어려운 기존 클래스",
        "적응자 : 적응 대상의 인터페이스를 타겟에 맞게 변환",
        "클라이언트 : 타겟을 기대하며 어댑터를 통해 적응 대상을 사용",
    ],
}

BUILDER_NOTES = {
    "key": "builder",
    "name": "Builder",
    "korean_name": "빌더 패턴",
    "category": "생성",
    "summary": "복잡한 객체의 생성 과정을 단계별로 분리해 같은 과정으로 다른 표현을 만드는 패턴",
    "pros": [
        "생성 로직이 캡슐화되어 클라이언트 코드가 단순해짐",
        "생성 과정과 표현을 분리해 같은 순서로 다양한 객체 생성 가능",
        "새 빌더 클래스 추가로 쉽게 확장",
        "디렉터가 생성 순서를 관리",
    ],
    "cons": [
        "관련 클래스가 많아 설계 의도 파악이 어려울 수 있음",
        "단계별 생성으로 인한 오버헤드",
    ],
    "participants": [
        "빌더 : 객체 생성 단계의 공통 인터페이스",
        "구체 빌더 : 각 단계를 구현하고 최종 제품 반환",
        "제품 : 빌더가 만드는 복잡한 객체",
        "디렉터 : 빌더 단계의 호출 순서를 정의 (선택)",
        "클라이언트 : 빌더와 디렉터로 객체를 생성",
    ],
}

FACTORY_METHOD_NOTES = {
    "key": "factory_method",
    "name": "Factory Method",
    "korean_name": "팩토리 메서드 패턴",
    "category": "생성",
    "summary": "객체 생성의 세부사항을 서브 클래스에 위임하는 패턴",
    "pros": [
        "새 제품이 추가되어도 기존 코드 수정 없이 확장 가능",
        "공통 생성 흐름을 상위 클래스에서 재사용",
        "클라이언트는 구체 클래스가 아닌 추상 타입에 의존",
    ],
    "cons": [
        "클래스와 인터페이스가 늘어나 구조가 복잡해짐",
        "제품마다 생성자 서브 클래스가 필요함",
    ],
    "participants": [
        "제품 : 생성될 객체의 인터페이스",
        "구체 제품 : 제품 인터페이스의 구현",
        "창조자 : 팩토리 메서드를 선언하고 템플릿 흐름을 정의",
        "구체 창조자 : 팩토리 메서드를 구현",
    ],
}

PROTOTYPE_NOTES = {
    "key": "prototype",
    "name": "Prototype",
    "korean_name": "프로토타입 패턴",
    "category": "생성",
    "summary": "기존 객체를 복제해 새로운 객체를 만드는 패턴",
    "pros": [
        "복잡한 초기화 없이 기존 객체를 복제해 생성",
        "구체 클래스를 몰라도 런타임에 객체 생성 가능",
        "복제를 지원하는 새 클래스 추가가 쉬움",
    ],
    "cons": [
        "얕은 복사로 인해 원본과 복제본이 참조를 공유할 수 있음",
        "모든 클래스에 clone 구현이 필요함",
    ],
    "participants": [
        "원형 : 복제 가능한 객체의 인터페이스",
        "구체 원형 : 내부 상태를 복사하는 clone 구현",
        "클라이언트 : clone을 호출해 새 객체 생성",
    ],
}

SINGLETON_NOTES = {
    "key": "singleton",
    "name": "Singleton",
    "korean_name": "싱글톤 패턴",
    "category": "생성",
    "summary": "객체를 하나만 생성하도록 제한하고 그 객체에 대한 접근 방법을 제공하는 패턴",
    "pros": [
        "어디서든 같은 객체에 접근 가능",
        "공통 자원을 하나의 객체로 관리",
        "인스턴스 간 데이터 동기화가 필요 없음",
    ],
    "cons": [
        "전역 인스턴스라 테스트에서 대체하기 어려움",
        "멀티 스레드 환경에서 초기화 동기화가 필요함",
        "확장성과 변경 가능성이 줄어듦",
    ],
    "participants": [
        "숨겨진 생성자 : 외부에서 직접 생성하지 못하도록 제한",
        "정적 인스턴스 : 클래스 내부에서 단일 인스턴스를 보관",
        "정적 메서드 : 인스턴스를 지연 생성하거나 반환",
    ],
}
