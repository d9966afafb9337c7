"""Unit tests for FieldAnalyzer and Summarizer."""

from briefing.field_analyzer import FIELD_ANALYSIS_FALLBACK, FieldAnalyzer
from briefing.models import ResearchResult
from briefing.summarizer import SUMMARY_FALLBACK, Summarizer
from tests.conftest import FIELD, SUMMARY, ScriptedGenerator


async def test_field_analysis_is_returned_verbatim():
    reply = "  Diffusion policies are replacing behaviour cloning.\n"
    analyzer = FieldAnalyzer(ScriptedGenerator({FIELD: reply}))

    assert await analyzer.analyze(["robotics"]) == reply


async def test_field_analysis_failure_returns_fallback(failing_generator):
    analyzer = FieldAnalyzer(failing_generator)

    assert await analyzer.analyze(["robotics"]) == FIELD_ANALYSIS_FALLBACK == "Error analyzing field."


async def test_summary_prompt_embeds_every_section():
    generator = ScriptedGenerator({SUMMARY: "Your briefing."})
    summarizer = Summarizer(generator)
    papers = [ResearchResult("A", "B", "C", 8), ResearchResult("D", "E", "F", 3)]
    tools = [ResearchResult("Tool", "Does things", "https://tool.dev", 6)]

    briefing = await summarizer.summarize(papers, "The field is moving fast.", tools)

    assert briefing == "Your briefing."
    (prompt,) = generator.prompts
    assert "**Top 5 Research Papers:**\n- A: B (C)\n- D: E (F)\n\n" in prompt
    assert "**Field Analysis:**\nThe field is moving fast.\n\n" in prompt
    assert "**Top 5 New AI Tools:**\n- Tool: Does things (https://tool.dev)\n\n" in prompt
    assert prompt.endswith("Please provide a concise summary of this information.")


async def test_summary_failure_returns_fallback(failing_generator):
    summarizer = Summarizer(failing_generator)

    assert await summarizer.summarize([], "", []) == SUMMARY_FALLBACK == "Error generating summary."
