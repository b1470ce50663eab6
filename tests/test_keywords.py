"""Tests for keyword extraction."""

import pytest

from matchwise.scoring.keywords import extract_keywords


class TestExtractKeywords:
    """Tests for extract_keywords."""

    @pytest.mark.parametrize("text", [None, "", "   \n\t"])
    def test_blank_input(self, text: str | None) -> None:
        """Test that blank input yields no keywords."""
        assert extract_keywords(text) == []

    def test_vocabulary_terms_found(self) -> None:
        """Test that vocabulary terms are matched case-insensitively."""
        keywords = extract_keywords("we use python, docker and graphql")
        assert "python" in keywords
        assert "docker" in keywords
        assert "graphql" in keywords

    def test_word_boundaries(self) -> None:
        """Test that terms are not matched inside longer words."""
        keywords = extract_keywords("javascripting reactive gitops")
        assert "javascript" not in keywords
        assert "react" not in keywords
        assert "git" not in keywords

    def test_dotted_terms(self) -> None:
        """Test that dotted spellings are found."""
        keywords = extract_keywords("experience with node.js and vue.js")
        assert "node.js" in keywords
        assert "vue.js" in keywords
        assert "node" in keywords

    def test_capitalized_words_are_kept(self) -> None:
        """Test that capitalized proper nouns are treated as technologies."""
        keywords = extract_keywords("Experience with Kafka, Terraform.")
        assert "kafka" in keywords
        assert "terraform" in keywords

    def test_common_words_excluded(self) -> None:
        """Test that capitalized common words are ignored."""
        keywords = extract_keywords("The New way")
        assert "the" not in keywords
        assert "new" not in keywords

    def test_short_capitalized_words_excluded(self) -> None:
        """Test that capitalized tokens shorter than 3 characters are ignored."""
        assert "go" not in extract_keywords("Go")

    def test_lowercase_non_vocabulary_ignored(self) -> None:
        """Test that lowercase words outside the vocabulary are ignored."""
        assert extract_keywords("looking for motivated people") == []

    def test_ui_injects_frontend(self) -> None:
        """Test that a UI role always yields the frontend keyword."""
        assert "frontend" in extract_keywords("Senior UI Developer")

    def test_server_injects_backend(self) -> None:
        """Test that server work yields the backend keyword."""
        assert "backend" in extract_keywords("maintain server infrastructure")

    def test_full_stack_injects_all_domains(self) -> None:
        """Test that full stack titles yield fullstack, frontend and backend."""
        keywords = extract_keywords("full stack engineer")
        assert "fullstack" in keywords
        assert "frontend" in keywords
        assert "backend" in keywords

    def test_no_duplicates_and_discovery_order(self) -> None:
        """Test that keywords are deduplicated in discovery order."""
        keywords = extract_keywords("Frontend Engineer React and TypeScript required")
        assert keywords == ["react", "typescript", "frontend", "engineer"]

    def test_deterministic(self) -> None:
        """Test that the same text always yields the same list."""
        text = "Backend Python developer with AWS and Docker"
        assert extract_keywords(text) == extract_keywords(text)
