"""Tests for the ATS analyzer tool."""

import pytest

from ats_checker.config import AnalyzerConfig
from ats_checker.domain.vocabulary import DEFAULT_VOCABULARY
from ats_checker.tools import ATSAnalyzerTool


@pytest.fixture
def analyzer(tmp_path):
    return ATSAnalyzerTool(workspace_dir=str(tmp_path))


class TestATSAnalyzerTool:
    @pytest.mark.asyncio
    async def test_scores_resume_file(self, analyzer, good_resume_file, backend_job_description):
        result = await analyzer.execute(
            path=str(good_resume_file),
            job_title="Backend Engineer",
            job_description=backend_job_description,
        )
        assert result.success
        assert result.data["scores"]["overall"] == 86
        assert result.data["missing_keywords"] == ["problem solving", "communication skills"]
        assert "ATS Score: 86/100" in result.output

    @pytest.mark.asyncio
    async def test_relative_path_resolved_against_workspace(self, analyzer, good_resume_file):
        result = await analyzer.execute(path=good_resume_file.name, job_title="Engineer", job_description="Python")
        assert result.success
        assert result.data["parsed_resume"]["full_name"] == "Jane Smith"

    @pytest.mark.asyncio
    async def test_missing_file(self, analyzer):
        result = await analyzer.execute(path="ghost.pdf", job_title="Engineer", job_description="Python")
        assert not result.success
        assert "File not found" in result.error

    @pytest.mark.asyncio
    async def test_blank_job_title(self, analyzer, good_resume_file):
        result = await analyzer.execute(path=str(good_resume_file), job_title=" ", job_description="Python")
        assert not result.success
        assert result.error == "Job title is required"

    @pytest.mark.asyncio
    async def test_empty_file(self, analyzer, tmp_path):
        (tmp_path / "empty.txt").write_bytes(b"")
        result = await analyzer.execute(path="empty.txt", job_title="Engineer", job_description="Python")
        assert not result.success
        assert "No extractable text" in result.error

    @pytest.mark.asyncio
    async def test_custom_vocabulary(self, tmp_path, good_resume_file):
        vocabulary = DEFAULT_VOCABULARY.with_overrides({"technical_skills": ["Haskell"]})
        tool = ATSAnalyzerTool(workspace_dir=str(tmp_path), config=AnalyzerConfig(vocabulary=vocabulary))
        result = await tool.execute(
            path=str(good_resume_file),
            job_title="Engineer",
            job_description="Haskell and Python wanted",
        )
        assert result.success
        assert result.data["keyword_match"]["missing"] == ["Haskell"]
        assert result.data["scores"]["keyword_match"] == 0

    @pytest.mark.asyncio
    async def test_unreadable_path(self, analyzer, tmp_path):
        (tmp_path / "resume.txt").mkdir()
        result = await analyzer.execute(path="resume.txt", job_title="Engineer", job_description="Python")
        assert not result.success
        assert "Could not read" in result.error
