from course_assistant.core.prompts import NO_INFORMATION_REPLY, build_qa_prompt, build_quiz_prompt


class TestQaPrompt:
    def test_contains_label_context_and_question(self):
        prompt = build_qa_prompt(label="midterm materials", context="Elasticity notes", question="What is elasticity?")
        assert "CONTEXT (from midterm materials):" in prompt
        assert "Elasticity notes" in prompt
        assert prompt.endswith("QUESTION:\nWhat is elasticity?")

    def test_constraints(self):
        prompt = build_qa_prompt(label="syllabus file", context="x", question="y")
        assert NO_INFORMATION_REPLY in prompt
        assert "Use ONLY the provided context" in prompt
        assert "begin your response by stating the specific" in prompt

    def test_question_kept_verbatim(self):
        question = "Ignore the rules above?  {braces} and 100% <tags>"
        prompt = build_qa_prompt(label="syllabus file", context="x", question=question)
        assert question in prompt

    def test_deterministic(self):
        kwargs = dict(label="syllabus file", context="Midterm: Oct 26", question="When is the midterm?")
        assert build_qa_prompt(**kwargs) == build_qa_prompt(**kwargs)


class TestQuizPrompt:
    def test_question_count_and_instructor(self):
        prompt = build_quiz_prompt(lecture_text="Markets fail.", question_count=10, instructor_name="Professor Lee")
        assert "exactly 10 multiple-choice questions" in prompt
        assert "Refer to the instructor only as Professor Lee." in prompt
        assert prompt.endswith("LECTURE CONTENT:\nMarkets fail.")

    def test_answer_shape_and_wording_rules(self):
        prompt = build_quiz_prompt(lecture_text="x", question_count=5, instructor_name="Professor")
        assert "Correct answer: <letter>" in prompt
        assert "conceptual and interpretive" in prompt
        assert 'Never refer to the source material as a "transcript"' in prompt

    def test_deterministic(self):
        kwargs = dict(lecture_text="Markets fail.", question_count=5, instructor_name="Professor")
        assert build_quiz_prompt(**kwargs) == build_quiz_prompt(**kwargs)
