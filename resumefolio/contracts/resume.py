from typing import Any, Dict, Protocol

class ITextExtractor(Protocol):
    def extract(self, file_path: str, original_name: str) -> str: ...

class IResumeParser(Protocol):
    async def parse(self, resume_text: str) -> Dict[str, Any]: ...
