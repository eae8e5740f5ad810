import asyncio
import os
import tempfile

import pytest

from resumefolio.services.resume import ExtractionFailedError, FileTooLargeError, NoJsonFoundError, UpstreamError
from resumefolio.services.resume_service import ResumeService


def upload(client, filename="resume.pdf", content=b"%PDF-1.4 fake"):
    return client.post("/upload", files={"resume": (filename, content, "application/octet-stream")})


def test_upload_returns_parsed_data_with_defaults(client, stub_parser, stub_extractor):
    response = upload(client)

    assert response.status_code == 200
    parsed = response.json()["parsedData"]
    assert parsed["name"] == "John Doe"
    assert parsed["email"] == "john@x.com"
    assert parsed["phone"] == "555-1234"
    assert parsed["summary"] == ""
    assert parsed["skills"] == []
    assert parsed["experience"] == []
    assert stub_parser.calls == ["John Doe, john@x.com, 555-1234, built X, Y, Z"]


def test_upload_deletes_temp_file_after_success(client, stub_extractor):
    upload(client, filename="resume.docx")

    assert len(stub_extractor.paths) == 1
    assert stub_extractor.paths[0].endswith(".docx")
    assert not os.path.exists(stub_extractor.paths[0])


def test_prose_reply_is_400_and_temp_file_is_gone(client, stub_parser, stub_extractor):
    stub_parser.error = NoJsonFoundError("No JSON found in the model response")

    response = upload(client)

    assert response.status_code == 400
    assert response.json()["error"] == "No JSON found in the model response"
    assert not os.path.exists(stub_extractor.paths[0])


def test_extraction_failure_is_400_and_temp_file_is_gone(client, stub_parser, stub_extractor):
    stub_extractor.error = ExtractionFailedError("Could not read the uploaded .pdf file")

    response = upload(client)

    assert response.status_code == 400
    assert not os.path.exists(stub_extractor.paths[0])
    assert stub_parser.calls == []


def test_upstream_failure_is_502(client, stub_parser):
    stub_parser.error = UpstreamError("Failed to parse resume with the AI service")

    response = upload(client)

    assert response.status_code == 502


def test_unsupported_extension_is_rejected_before_extraction(client, stub_extractor):
    response = upload(client, filename="resume.png")

    assert response.status_code == 400
    assert "Unsupported file type" in response.json()["error"]
    assert stub_extractor.paths == []


def test_oversized_upload_is_rejected(client, stub_extractor, monkeypatch):
    from resumefolio.config import settings

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)
    response = upload(client, content=b"x" * 10)

    assert response.status_code == 400
    assert stub_extractor.paths == []


def test_upload_without_file_is_400(client):
    response = client.post("/upload")

    assert response.status_code == 400


class RecordingUpload:
    def __init__(self, content, filename="resume.pdf", size=None):
        self.filename = filename
        self.size = size
        self.content = content
        self.read_sizes = []

    async def read(self, size=-1):
        self.read_sizes.append(size)
        return self.content if size < 0 else self.content[:size]


def test_oversized_upload_reads_at_most_one_byte_past_the_limit(stub_parser, stub_extractor, monkeypatch):
    from resumefolio.config import settings

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)
    limit = 1024 * 1024
    upload_file = RecordingUpload(b"x" * (limit + 100))

    with pytest.raises(FileTooLargeError):
        asyncio.run(ResumeService(stub_extractor, stub_parser).process_upload(upload_file))

    assert upload_file.read_sizes == [limit + 1]
    assert stub_extractor.paths == []
    assert stub_parser.calls == []


def test_declared_size_over_the_limit_is_rejected_without_reading(stub_parser, stub_extractor, monkeypatch):
    from resumefolio.config import settings

    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 1)
    upload_file = RecordingUpload(b"", size=5 * 1024 * 1024)

    with pytest.raises(FileTooLargeError):
        asyncio.run(ResumeService(stub_extractor, stub_parser).process_upload(upload_file))

    assert upload_file.read_sizes == []


def test_temp_file_is_removed_when_writing_fails(stub_parser, stub_extractor, monkeypatch):
    real_named_temporary_file = tempfile.NamedTemporaryFile
    created = []

    class FailingTemp:
        def __init__(self, **kwargs):
            self._file = real_named_temporary_file(**kwargs)
            self.name = self._file.name
            created.append(self.name)

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            self._file.close()
            return False

        def write(self, data):
            raise OSError("No space left on device")

    monkeypatch.setattr(tempfile, "NamedTemporaryFile", FailingTemp)

    with pytest.raises(OSError):
        asyncio.run(ResumeService(stub_extractor, stub_parser).extract_text(b"%PDF", "resume.pdf"))

    assert len(created) == 1
    assert not os.path.exists(created[0])
    assert stub_extractor.paths == []
