"""
패턴 카탈로그 모델

PatternCategory: 생성 / 구조 분류
PatternInfo: 패턴별 설명 (목적, 장점, 단점, 구성 요소)
"""
from enum import Enum
from typing import List

from src.core.patterns.base_model import ImmutableModel, Field, field_validator


class PatternCategory(str, Enum):
    """GoF 분류"""
    CREATIONAL = "생성"
    STRUCTURAL = "구조"


class PatternInfo(ImmutableModel):
    """
    패턴 설명 (불변)

    Example:
        {
            "key": "adapter",
            "name": "Adapter",
            "korean_name": "어댑터 패턴",
            "category": "구조",
            "summary": "호환되지 않는 인터페이스를 ...",
            "pros": [...],
            "cons": [...],
            "participants": ["타겟 : 클라이언트가 기대하는 인터페이스", ...]
        }
    """

    key: str = Field(
        pattern=r'^[a-z][a-z_]*$',
        description="러너에서 사용하는 식별자 (snake_case)"
    )
    name: str = Field(min_length=1, description="영문 패턴명")
    korean_name: str = Field(min_length=1, description="한글 패턴명")
    category: PatternCategory = Field(description="패턴 분류")
    summary: str = Field(min_length=1, description="한 줄 요약")
    pros: List[str] = Field(default_factory=list, description="장점")
    cons: List[str] = Field(default_factory=list, description="단점")
    participants: List[str] = Field(
        default_factory=list,
        description="구성 요소 ('역할 : 설명' 형식)"
    )

    @field_validator('pros', 'cons', 'participants')
    @classmethod
    def strip_entries(cls, v: List[str]) -> List[str]:
        """빈 항목 제거 및 공백 정리"""
        return [entry.strip() for entry in v if entry.strip()]
