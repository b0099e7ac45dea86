"""
Enhanced BaseModel
Pydantic BaseModel에 직렬화 헬퍼를 더한 공통 모델
"""
from pydantic import (
    BaseModel as PydanticBaseModel,
    ConfigDict,
    Field,
    field_validator
)
from typing import Dict, Any, Optional
import json


class BaseModel(PydanticBaseModel):
    """
    공통 BaseModel

    Features:
    - dict / JSON 변환
    - 할당 시 검증 (validate_assignment)
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """
        모델을 dict로 변환

        Args:
            exclude_none: None 값 제외 여부

        Returns:
            dict 표현
        """
        return self.model_dump(exclude_none=exclude_none, mode="python")

    def to_json(self, exclude_none: bool = True, indent: Optional[int] = None) -> str:
        """
        모델을 JSON 문자열로 변환 (한글 그대로 출력)
        """
        data = self.to_dict(exclude_none=exclude_none)
        return json.dumps(data, indent=indent, default=str, ensure_ascii=False)


class ImmutableModel(BaseModel):
    """
    Immutable BaseModel

    생성 후 수정 불가
    """

    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )
