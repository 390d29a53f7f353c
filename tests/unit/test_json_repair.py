"""
Unit tests for quizforge/services/json_repair.py
Tests: fence stripping, brace slicing, pass-through without braces,
never-raising extraction, parse errors deferred to json.loads.
"""

import json

import pytest

from quizforge.services.json_repair import extract_json_candidate, parse_model_output

QUIZ_JSON = '{"topic": "Zoology", "difficulty": "easy", "questions": [{"id": "q1"}]}'


class TestExtractJsonCandidate:

    def test_plain_object_unchanged(self):
        assert extract_json_candidate(QUIZ_JSON) == QUIZ_JSON

    def test_json_fence_removed(self):
        raw = f"```json\n{QUIZ_JSON}\n```"
        assert extract_json_candidate(raw) == QUIZ_JSON

    def test_bare_fence_removed(self):
        raw = f"```\n{QUIZ_JSON}\n```"
        assert extract_json_candidate(raw) == QUIZ_JSON

    def test_prose_around_fence_removed(self):
        raw = f"Sure! Here is your quiz:\n```json\n{QUIZ_JSON}\n```\nGood luck."
        assert extract_json_candidate(raw) == QUIZ_JSON

    def test_prose_around_object_removed(self):
        raw = f"Here you go: {QUIZ_JSON} Let me know if you need more."
        assert extract_json_candidate(raw) == QUIZ_JSON

    def test_slices_first_open_to_last_close_brace(self):
        raw = 'noise {"a": {"b": 1}} trailing } end'
        assert extract_json_candidate(raw) == '{"a": {"b": 1}} trailing }'

    def test_no_braces_passes_original_through(self):
        raw = "I cannot help with that request."
        assert extract_json_candidate(raw) == raw

    def test_fenced_without_braces_passes_original_through(self):
        raw = "```\nnot json at all\n```"
        assert extract_json_candidate(raw) == raw

    def test_inline_fence_inside_string_value_is_kept(self):
        raw = 'Here you go: {"explanation": "run ```ls``` first"}'
        assert extract_json_candidate(raw) == '{"explanation": "run ```ls``` first"}'

    @pytest.mark.parametrize("raw", ["", None, "}{", "{", "```", "```json"])
    def test_never_raises(self, raw):
        extract_json_candidate(raw)


class TestParseModelOutput:

    def test_fenced_and_unfenced_parse_identically(self):
        fenced = f"```json {QUIZ_JSON} ```"
        assert parse_model_output(fenced) == parse_model_output(QUIZ_JSON)
        assert parse_model_output(fenced) == json.loads(QUIZ_JSON)

    def test_backticks_inside_string_value_parse(self):
        raw = 'Here you go: {"explanation": "run ```ls``` first"}'
        assert parse_model_output(raw) == {"explanation": "run ```ls``` first"}

    def test_invalid_json_raises_decode_error(self):
        with pytest.raises(json.JSONDecodeError):
            parse_model_output('{"topic": "Zoology", "questions": [}')

    def test_text_without_braces_raises_decode_error(self):
        with pytest.raises(json.JSONDecodeError):
            parse_model_output("Sorry, I can't do that.")

    def test_empty_output_raises_decode_error(self):
        with pytest.raises(json.JSONDecodeError):
            parse_model_output("")
