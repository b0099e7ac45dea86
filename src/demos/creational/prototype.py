"""
프로토타입 패턴

Document.clone()으로 기존 문서를 복제해 새 문서를 만든다

Usage:
    python -m src.demos.creational.prototype
"""
from abc import ABC, abstractmethod
from typing import List

from src.core.patterns.base_model import BaseModel, Field
from src.utils.logger import get_logger

logger = get_logger(__name__)


# 원형
class Prototype(ABC):
    @abstractmethod
    def clone(self) -> "Prototype":
        pass


# 구체 원형
class Document(BaseModel, Prototype):
    """
    복제 가능한 문서

    clone()은 얕은 복사:
    - title, content (str): 복제본에서 값을 바꿔도 원본은 그대로
    - tags (list): 원본과 같은 리스트 객체를 공유
    """

    title: str = Field(description="문서 제목")
    content: str = Field(description="문서 본문")
    tags: List[str] = Field(default_factory=list, description="공유 태그 목록")

    def clone(self) -> "Document":
        copied = self.model_copy(deep=False)
        logger.debug(f"Document cloned: {self.title}")
        return copied

    def display(self) -> List[str]:
        lines = [
            f"Document: {self.title}",
            f"Content: {self.content}",
        ]
        for line in lines:
            print(line)

        return lines


# 클라이언트
def client_code() -> List[str]:
    original_doc = Document(
        title="Original",
        content="This is the original document."
    )
    lines = original_doc.display()

    cloned_doc = original_doc.clone()
    cloned_doc.title = "Clone"
    lines += cloned_doc.display()

    return lines


def main() -> List[str]:
    return client_code()


if __name__ == "__main__":
    main()
