"""Tests for label and heuristic content type detection."""

import pytest

from classroom_assistant.content import ContentTypeDetector
from classroom_assistant.models.content import ContentType


class TestDetectFromLine:
    """Test label detection."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("TOPIC: Math", ContentType.TOPIC),
            ("QUESTION: What is 2+2?", ContentType.QUESTION),
            ("- TOPIC: Physics", ContentType.TOPIC),
            ("- QUESTION: How does this work?", ContentType.QUESTION),
            ("-TOPIC: No space after bullet", ContentType.TOPIC),
            ("   TOPIC: Indented", ContentType.TOPIC),
        ],
    )
    def test_labeled_lines(self, line, expected):
        assert ContentTypeDetector.detect_from_line(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "No prefix here",
            "plain line",
            "topic: lowercase label",
            "Question: mixed case label",
            "* TOPIC: other bullet",
            "The TOPIC: is mid-line",
            "",
        ],
    )
    def test_unlabeled_lines(self, line):
        assert ContentTypeDetector.detect_from_line(line) is None


class TestExtractContent:
    """Test label stripping."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("TOPIC: Math", "Math"),
            ("QUESTION: What is 2+2?", "What is 2+2?"),
            ("- TOPIC: Physics", "Physics"),
            ("- QUESTION: How does this work?", "How does this work?"),
            ("TOPIC:Thermodynamics  ", "Thermodynamics"),
            ("No prefix here", "No prefix here"),
            ("  padded text  ", "padded text"),
        ],
    )
    def test_extract(self, line, expected):
        assert ContentTypeDetector.extract_content(line) == expected

    def test_label_only_yields_empty(self):
        assert ContentTypeDetector.extract_content("- TOPIC:   ") == ""

    @pytest.mark.parametrize(
        "line",
        [
            "Optics",
            "TOPIC: Math",
            "- QUESTION: How does this work?",
            "  padded text  ",
            "- TOPIC:   ",
            "",
        ],
    )
    def test_extract_is_idempotent(self, line):
        once = ContentTypeDetector.extract_content(line)

        assert ContentTypeDetector.extract_content(once) == once


class TestDetectFromContent:
    """Test the heuristic for unlabeled text."""

    @pytest.mark.parametrize(
        "text",
        [
            "What is gravity?",
            "How does this work?",
            "Photosynthesis in C4 plants?",
            "why do stars twinkle",
            "Can energy be destroyed",
            "Is light a wave or a particle",
        ],
    )
    def test_questions(self, text):
        assert ContentTypeDetector.detect_from_content(text) == ContentType.QUESTION

    @pytest.mark.parametrize(
        "text",
        [
            "Quantum Physics",
            "Newton's Laws of Motion",
            "Isotopes and their half-lives",
            "Whatever the lecturer said",
            "Donations to the lab",
            "Do's and don'ts of lab safety",
            "Is-ness of being",
            "Why",
        ],
    )
    def test_topics(self, text):
        assert ContentTypeDetector.detect_from_content(text) == ContentType.TOPIC
