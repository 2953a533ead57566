"""
Chat service for conversational course authoring.

Orchestrates one chat turn: load (or lazily create) the session, build
the prompt, call the model, extract the outline, derive the display
message, update the session and persist it.

Dependencies: course_copilot.core, course_copilot.boundary.llm, course_copilot.application.services.session_store
System role: Chat turn orchestration layer
"""

import logging
from typing import Any

from course_copilot.application.services.session_store import SessionStore
from course_copilot.boundary.llm.llm_client import LLMClient
from course_copilot.core.exceptions import ValidationError
from course_copilot.core.outline.display import build_display_message
from course_copilot.core.outline.extractor import OutlineExtractor
from course_copilot.core.prompts.course_prompt import CoursePromptBuilder
from course_copilot.core.session.conversation_session import create_session
from course_copilot.models.chat import ChatTurnResult
from course_copilot.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for course-authoring turns.

    Coordinates session loading, prompt building, the model call, outline
    extraction and session persistence.
    """

    def __init__(
        self,
        store: SessionStore,
        llm_client: LLMClient,
        prompt_builder: CoursePromptBuilder | None = None,
        extractor: OutlineExtractor | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            store: Session persistence
            llm_client: Language model client
            prompt_builder: Prompt builder (default: 5-turn history window)
            extractor: Outline extractor (default: fenced then raw JSON)
        """
        self.store = store
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder or CoursePromptBuilder()
        self.extractor = extractor or OutlineExtractor()

    def process_turn(
        self,
        session_id: str,
        message: str,
        client_history: list[dict[str, Any]] | None = None,
        user_id: int | None = None,
    ) -> ChatTurnResult:
        """
        Process one author message.

        Flow:
        1. Load the session, creating it when the id is unknown
        2. Replace the transcript with client_history when supplied
        3. Build the prompt from prior turns and the current outline
        4. Call the model (failures propagate as LLMServiceError)
        5. Extract a new outline or keep the prior one
        6. Record both messages, the outline and the title, then save

        Args:
            session_id: Session identifier
            message: Author's message
            client_history: Full client transcript, replacing the stored one
            user_id: Owner used when the session is created here

        Returns:
            ChatTurnResult: Display message, current outline and save status

        Raises:
            ValidationError: If session_id or message is blank
            LLMServiceError: If the model call fails
        """
        if not session_id:
            raise ValidationError("Session ID is required", field="session_id")
        if not message or not message.strip():
            raise ValidationError("Message is required", field="message")

        session = self.store.get(session_id)
        if session is None:
            session = create_session(user_id=user_id, session_id=session_id)
            logger.info("Created session for chat turn", extra={"session_id": session_id})

        if client_history is not None:
            session.replace_messages(client_history)

        prior_outline = session.outline
        prompt = self.prompt_builder.build(message, session.history_for_prompt(), prior_outline)
        session.add_message("user", message)

        response = self.llm_client.generate(prompt)

        extraction = self.extractor.run(response.content, prior_outline)
        is_new_outline = extraction.found and extraction.outline != prior_outline
        display_message = build_display_message(response.content, extraction, is_new_outline)

        log_with_context(
            logger,
            logging.DEBUG,
            "Course structure extraction result",
            session_id=session_id,
            has_prior_outline=prior_outline is not None,
            found_new_outline=is_new_outline,
            strategy=extraction.strategy,
            response_length=len(response.content),
        )

        metadata: dict[str, Any] = {}
        if response.tokens_used is not None:
            metadata["tokens_used"] = response.tokens_used
        session.add_message("assistant", display_message, metadata)

        if is_new_outline:
            session.set_outline(extraction.outline)
        title_changed = session.apply_course_title()
        if title_changed:
            logger.info(
                "Session title updated during chat",
                extra={"session_id": session_id, "title": session.title},
            )

        result = self.store.save(session)
        return ChatTurnResult(
            session_id=session.session_id,
            display_message=display_message,
            outline=session.outline,
            outline_updated=is_new_outline,
            title=session.title,
            saved=result.saved,
        )
