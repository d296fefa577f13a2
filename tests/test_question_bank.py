from lingomentor.question_bank import SAMPLE_QUESTIONS, translate_question_bank


def test_fills_question_and_options(translator):
    result = translate_question_bank(SAMPLE_QUESTIONS, ["es"], translator)

    mcq = result["web-development"][0]
    assert mcq["translations"]["es"]["question"] == "[es] What does CSS stand for?"
    assert mcq["translations"]["es"]["options"][1] == "[es] Cascading Style Sheets"

    open_voice = result["web-development"][1]
    assert "options" not in open_voice["translations"]["es"]


def test_source_bank_is_not_mutated(translator):
    translate_question_bank(SAMPLE_QUESTIONS, ["es"], translator)
    assert SAMPLE_QUESTIONS["programming-basics"][0]["translations"] == {}


def test_existing_translations_are_skipped(translator):
    first = translate_question_bank(SAMPLE_QUESTIONS, ["es"], translator)
    translator.calls.clear()

    translate_question_bank(first, ["es"], translator)
    assert translator.calls == []


def test_failed_language_is_left_out(translator):
    translator.fail_for = {"fr"}
    result = translate_question_bank(SAMPLE_QUESTIONS, ["fr", "de"], translator)

    for questions in result.values():
        for question in questions:
            assert "fr" not in question["translations"]
            assert "de" in question["translations"]
