from __future__ import annotations

NO_INFORMATION_REPLY = "I'm sorry, I don't have that information in the current course materials."


def build_qa_prompt(*, label: str, context: str, question: str) -> str:
    return (
        "INSTRUCTION:\n"
        "You are a precise academic assistant. Your goal is to provide accurate information "
        "based strictly on the provided context.\n\n"
        "CONSTRAINTS:\n"
        "1. Zero Outside Knowledge: Use ONLY the provided context. If the answer is not stated "
        f'in the context, respond with: "{NO_INFORMATION_REPLY}"\n'
        "2. Source Attribution: You must always begin your response by stating the specific "
        "Lecture Name or Document Title where the information was found.\n\n"
        f"CONTEXT (from {label}):\n"
        f"{context.strip()}\n\n"
        "QUESTION:\n"
        f"{question}"
    )


def build_quiz_prompt(*, lecture_text: str, question_count: int, instructor_name: str) -> str:
    """
    Practice-quiz prompt for one lecture.

    Each question gets four lettered options and one stated correct answer,
    so the reply can be checked by counting "Correct answer:" lines.
    """
    return (
        "INSTRUCTION:\n"
        f"You are a teaching assistant writing a practice quiz for students. Write exactly "
        f"{question_count} multiple-choice questions based ONLY on the lecture content below.\n\n"
        "CONSTRAINTS:\n"
        "1. Use only the lecture content. Do not add outside facts.\n"
        "2. Focus on conceptual and interpretive understanding, not recall of isolated facts, "
        "names or dates.\n"
        "3. Number the questions 1 to "
        f"{question_count}. Give each question four options labeled A) to D), with exactly one "
        "correct option.\n"
        '4. Directly after the options of each question, write a line of the form '
        '"Correct answer: <letter>".\n'
        '5. Never refer to the source material as a "transcript". Call it "the lecture".\n'
        f"6. Refer to the instructor only as {instructor_name}.\n\n"
        "LECTURE CONTENT:\n"
        f"{lecture_text.strip()}"
    )
