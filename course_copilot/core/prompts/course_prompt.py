"""Course generation prompts.

Assembles the model prompt for a chat turn from the transcript, the
current outline and the new message, and forces the structured JSON
reply whenever the conversation is about course structure.

Dependencies: json (stdlib)
System role: Prompt assembly for chat, lesson content and quiz generation
"""

import json
from typing import Any, Sequence

FRAMING_SENTENCE = "You are an AI course creation assistant helping to build online courses. "

COURSE_KEYWORDS = (
    "course",
    "section",
    "lesson",
    "module",
    "curriculum",
    "add",
    "create",
    "modify",
    "update",
    "remove",
    "delete",
    "change",
)

STRUCTURE_INSTRUCTIONS = """

IMPORTANT: If you are creating or modifying a course structure, you MUST include the complete updated course structure in this exact JSON format at the end of your response:
```json
{
  "title": "Course Title",
  "description": "Course description",
  "sections": [
    {
      "title": "Section Title",
      "lessons": [
        {
          "title": "Lesson Title",
          "duration": "15 min"
        }
      ]
    }
  ]
}
```

If modifying an existing course, include ALL sections and lessons (both existing and new) in your response."""

LESSON_CONTENT_INSTRUCTIONS = """
Please provide comprehensive lesson content including:
- Introduction to the topic
- Key concepts and explanations
- Examples and demonstrations
- Practice exercises
- Summary and key takeaways

Format the content with clear headings and sections."""

QUIZ_GENERATION_TEMPLATE = """Generate {count} multiple-choice questions based on the following content.

For each question, provide:
1. Question text
2. Four answer options (A, B, C, D)
3. The correct answer letter
4. Brief explanation of why the answer is correct

Format the output as JSON array with this structure:
[
    {{
        "question": "Question text here",
        "options": {{
            "A": "First option",
            "B": "Second option",
            "C": "Third option",
            "D": "Fourth option"
        }},
        "correct_answer": "A",
        "explanation": "Explanation text"
    }}
]

Content to create questions from:
{content}"""


def mentions_course_structure(message: str) -> bool:
    """Case-insensitive substring match against COURSE_KEYWORDS."""
    lowered = message.lower()
    return any(keyword in lowered for keyword in COURSE_KEYWORDS)


class CoursePromptBuilder:
    """Builds the prompt for one course-authoring chat turn."""

    def __init__(self, history_window: int = 5) -> None:
        """
        Initialize prompt builder.

        Args:
            history_window: Number of most recent turns to include
        """
        self.history_window = history_window

    def build(
        self,
        user_message: str,
        history: Sequence[dict[str, Any]] | None,
        outline: dict[str, Any] | None,
    ) -> str:
        """
        Build the chat prompt.

        Args:
            user_message: The author's new message
            history: Prior turns as [{role, content}]
            outline: Current course outline, if any

        Returns:
            str: Prompt text for the model
        """
        has_outline = bool(outline and outline.get("title"))
        parts = [FRAMING_SENTENCE]

        if has_outline:
            parts.append(
                "\n\nCurrent course structure:\n```json\n"
                + json.dumps(outline, indent=4, ensure_ascii=False)
                + "\n```\n"
            )

        recent = list(history or [])[-self.history_window:] if self.history_window else []
        if recent:
            parts.append("\n\nConversation history:\n")
            for turn in recent:
                parts.append(f"{turn.get('role', '')}: {turn.get('content', '')}\n")

        parts.append(f"\n\nUser: {user_message}\n\nAssistant: ")

        if has_outline or mentions_course_structure(user_message):
            parts.append(STRUCTURE_INSTRUCTIONS)

        return "".join(parts)


def build_lesson_content_prompt(lesson_title: str, course_context: dict[str, Any] | None = None) -> str:
    """
    Build the prompt that drafts a single lesson's content.

    Args:
        lesson_title: Lesson to write
        course_context: Optional {title, description} of the parent course

    Returns:
        str: Prompt text for the model
    """
    course_context = course_context or {}
    prompt = f"Generate detailed content for a lesson titled: '{lesson_title}'.\n\n"
    if course_context.get("title"):
        prompt += f"This lesson is part of the course: '{course_context['title']}'.\n"
    if course_context.get("description"):
        prompt += f"Course description: {course_context['description']}\n"
    return prompt + LESSON_CONTENT_INSTRUCTIONS


def build_quiz_generation_prompt(content: str, count: int = 5) -> str:
    """Prompt for generating multiple-choice questions from lesson content."""
    return QUIZ_GENERATION_TEMPLATE.format(count=count, content=content)
