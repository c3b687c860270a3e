"""
Unit tests for line readers.
"""

from unittest.mock import patch

import pytest

from github_activity.services.prompt import ConsoleLineReader


@pytest.mark.unit
@pytest.mark.asyncio
class TestConsoleLineReader:
    """Test ConsoleLineReader."""

    async def test_ask_reads_and_strips(self):
        reader = ConsoleLineReader()
        with patch("builtins.input", return_value="  2 \n") as mock_input:
            async with reader.open() as ask:
                answer = await ask("Select an option (1-6): ")

        assert answer == "2"
        mock_input.assert_called_once_with("Select an option (1-6): ")

    async def test_multiple_questions_in_one_exchange(self):
        reader = ConsoleLineReader()
        with patch("builtins.input", side_effect=["1", "octo"]):
            async with reader.open() as ask:
                first = await ask("a: ")
                second = await ask("b: ")

        assert (first, second) == ("1", "octo")

    async def test_end_of_input_propagates(self):
        reader = ConsoleLineReader()
        with patch("builtins.input", side_effect=EOFError):
            with pytest.raises(EOFError):
                async with reader.open() as ask:
                    await ask("a: ")
