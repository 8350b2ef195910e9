from __future__ import annotations

import threading
import time
from enum import Enum
from typing import Any, Optional, Union

import requests
from loguru import logger
from pydantic import BaseModel

from schemas.errors import TransportError, ValidationError
from schemas.query import Profile, Query, QueryResult
from src.config.log_setup import preview
from src.config.settings import Settings, get_settings
from src.inference.extraction import ANSWER_MARKER, extract_answer
from src.inference.transport import HttpTransport

SubmitOutcome = Union[QueryResult, ValidationError, TransportError]


class ClientState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    HAS_RESULT = "has_result"
    HAS_ERROR = "has_error"


class ClientSnapshot(BaseModel):
    """Consistent read of the client's single state slot."""

    state: ClientState
    query: Optional[Query] = None
    result: Optional[QueryResult] = None
    error: Optional[Union[ValidationError, TransportError]] = None


class InferenceClient:
    """
    Mediates one question/answer cycle with the remote inference service.

    - ``submit`` validates input, sends exactly one POST and returns either a
      ``QueryResult`` or a typed error value. It never raises for input or
      transport problems.
    - State is a single slot (idle, pending, result or error). Every submit
      and reset takes a new sequence number; an exchange that completes after
      a newer submit or a reset does not touch the slot.
    """

    def __init__(
        self,
        endpoint: str,
        transport: Optional[HttpTransport] = None,
        marker: str = ANSWER_MARKER,
    ) -> None:
        self.endpoint = endpoint
        self.transport = transport or HttpTransport()
        self.marker = marker
        self._lock = threading.Lock()
        self._seq = 0
        self._state = ClientState.IDLE
        self._query: Optional[Query] = None
        self._result: Optional[QueryResult] = None
        self._error: Optional[Union[ValidationError, TransportError]] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "InferenceClient":
        settings = settings or get_settings()
        return cls(
            settings.inference_endpoint,
            transport=HttpTransport(timeout=settings.inference_timeout),
            marker=settings.answer_marker,
        )

    # --- Read side ---

    @property
    def state(self) -> ClientState:
        return self._state

    @property
    def query(self) -> Optional[Query]:
        return self._query

    @property
    def result(self) -> Optional[QueryResult]:
        return self._result

    @property
    def error(self) -> Optional[Union[ValidationError, TransportError]]:
        return self._error

    @property
    def is_pending(self) -> bool:
        return self._state is ClientState.PENDING

    def snapshot(self) -> ClientSnapshot:
        with self._lock:
            return ClientSnapshot(
                state=self._state,
                query=self._query,
                result=self._result,
                error=self._error,
            )

    # --- Operations ---

    def submit(self, question: Optional[str], profile: Any) -> SubmitOutcome:
        invalid = self._validate(question, profile)
        if invalid is not None:
            logger.info("Rejected submission: {}", invalid.message)
            with self._lock:
                self._seq += 1
                self._set(ClientState.HAS_ERROR, error=invalid)
            return invalid

        query = Query(question=question, profile=Profile(profile))
        with self._lock:
            self._seq += 1
            seq = self._seq
            self._set(ClientState.PENDING, query=query)

        logger.info(
            "Submission #{} profile={} question='{}'",
            seq,
            query.profile.value,
            preview(query.question),
        )
        start = time.perf_counter()
        outcome = self._exchange(query)
        elapsed = time.perf_counter() - start

        with self._lock:
            if seq != self._seq:
                logger.warning(
                    "Discarding stale outcome of submission #{} (current #{})", seq, self._seq
                )
                return outcome
            if isinstance(outcome, QueryResult):
                self._set(ClientState.HAS_RESULT, query=query, result=outcome)
            else:
                self._set(ClientState.HAS_ERROR, query=query, error=outcome)

        if isinstance(outcome, QueryResult):
            logger.info("Submission #{} answered in {:.2f}s", seq, elapsed)
        else:
            logger.warning("Submission #{} failed after {:.2f}s: {}", seq, elapsed, outcome.message)
        return outcome

    def reset(self) -> None:
        with self._lock:
            self._seq += 1
            self._set(ClientState.IDLE)

    # --- Internals ---

    def _set(
        self,
        state: ClientState,
        query: Optional[Query] = None,
        result: Optional[QueryResult] = None,
        error: Optional[Union[ValidationError, TransportError]] = None,
    ) -> None:
        self._state = state
        self._query = query
        self._result = result
        self._error = error

    @staticmethod
    def _validate(question: Optional[str], profile: Any) -> Optional[ValidationError]:
        if not isinstance(question, str) or not question.strip():
            return ValidationError(field="question")
        if isinstance(profile, Profile):
            return None
        if not isinstance(profile, str):
            return ValidationError(field="profile")
        try:
            Profile(profile)
        except ValueError:
            return ValidationError(field="profile")
        return None

    def _exchange(self, query: Query) -> Union[QueryResult, TransportError]:
        payload = {"question": query.question, "profile": query.profile.value}
        try:
            reply = self.transport.post_json(self.endpoint, payload)
        except requests.RequestException as exc:
            return TransportError(detail=str(exc) or exc.__class__.__name__)

        if not reply.ok:
            return TransportError(status_code=reply.status_code)

        body = reply.body
        raw_text = body.get("response") if isinstance(body, dict) else None
        if not isinstance(raw_text, str):
            return TransportError(status_code=reply.status_code, detail="malformed response body")

        return QueryResult(raw_text=raw_text, extracted_answer=extract_answer(raw_text, self.marker))
