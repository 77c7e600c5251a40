from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

from career_advisor.context.prompt_builder import PriorTurn, build_prompt
from career_advisor.context.records import ContextRecord
from career_advisor.core.config import AdvisorConfig
from career_advisor.core.conversation import Conversation
from career_advisor.core.errors import ToolExecutionFailure, TransportError
from career_advisor.core.interfaces import ContextProvider, ModelClient
from career_advisor.core.metrics import Timer
from career_advisor.tools.definitions import ModelResponse, ToolCallRequest, ToolTrace
from career_advisor.tools.registry import ToolRegistry, serialize_result

logger = logging.getLogger(__name__)


class AdviceStatus(str, Enum):
    DONE = "done"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class AdviceResult:
    status: AdviceStatus
    answer_text: Optional[str]
    rounds: int
    tool_traces: list[ToolTrace] = field(default_factory=list)
    context_titles: list[str] = field(default_factory=list)
    metrics: dict[str, float] = field(default_factory=dict)

    @property
    def done(self) -> bool:
        return self.status is AdviceStatus.DONE


class CareerAdvisor:
    """
    Question -> context lookup -> prompt -> model/tool loop.

    The loop sends the conversation to the model until it answers with plain
    text or the round limit is reached. Tool failures are fed back to the
    model; TransportError from the model client propagates to the caller.
    """

    def __init__(
        self,
        model: ModelClient,
        registry: ToolRegistry,
        context_provider: Optional[ContextProvider] = None,
        config: Optional[AdvisorConfig] = None,
    ) -> None:
        self._model = model
        self._registry = registry
        self._context = context_provider
        self._cfg = config or AdvisorConfig()

    @property
    def config(self) -> AdvisorConfig:
        return self._cfg

    def _lookup_context(self, question: str) -> list[ContextRecord]:
        if self._context is None:
            return []
        try:
            return list(self._context.search(question))
        except Exception as e:
            # Context is optional; fall back to an ungrounded prompt.
            logger.warning("Context search failed, continuing without context: %s: %s", type(e).__name__, e)
            return []

    def _invoke_one(self, call: ToolCallRequest) -> tuple[str, float]:
        start = time.perf_counter()
        result = self._registry.invoke(call.name, call.arguments)
        return result, (time.perf_counter() - start) * 1000.0

    def _run_tools(self, calls: list[ToolCallRequest]) -> list[tuple[str, float]]:
        """
        Run one round of tool calls under a shared deadline.
        Results come back in request order; late calls become error results.
        """
        pool = ThreadPoolExecutor(
            max_workers=min(self._cfg.max_parallel_tools, len(calls)),
            thread_name_prefix="advisor-tool",
        )
        try:
            futures = [pool.submit(self._invoke_one, c) for c in calls]
            deadline = time.monotonic() + self._cfg.tool_timeout_s
            results: list[tuple[str, float]] = []
            for call, fut in zip(calls, futures):
                try:
                    results.append(fut.result(timeout=max(0.0, deadline - time.monotonic())))
                except FutureTimeout:
                    logger.warning("Tool %s (%s) timed out after %.1fs", call.name, call.id, self._cfg.tool_timeout_s)
                    failure = ToolExecutionFailure(
                        call.name, f"Timed out after {self._cfg.tool_timeout_s:.1f}s"
                    )
                    results.append((serialize_result(failure.to_payload()), self._cfg.tool_timeout_s * 1000.0))
            return results
        finally:
            # Do not wait for stragglers that already timed out.
            pool.shutdown(wait=False, cancel_futures=True)

    def run_loop(self, conversation: Conversation, timer: Optional[Timer] = None) -> AdviceResult:
        """Drive the model/tool cycle on an already-started conversation."""
        timer = timer or Timer()
        schemas = self._registry.list_schemas()
        traces: list[ToolTrace] = []

        for round_no in range(1, self._cfg.max_rounds + 1):
            response: ModelResponse = timer.measure(
                "llm_ms", lambda: self._model.send(conversation, schemas)
            )

            if not response.wants_tools:
                logger.info("Final answer after %d round(s)", round_no)
                conversation.add_assistant_text(response.text or "")
                return AdviceResult(
                    status=AdviceStatus.DONE,
                    answer_text=response.text or "",
                    rounds=round_no,
                    tool_traces=traces,
                    metrics=timer.summary(),
                )

            calls = response.tool_calls
            logger.info("Round %d: model requested %s", round_no, [c.name for c in calls])
            try:
                conversation.add_tool_requests(calls, text=response.text)
            except ValueError as e:
                raise TransportError(f"Model returned an unusable tool request: {e}") from e

            outcomes = timer.measure("tools_ms", lambda: self._run_tools(calls))
            for call, (result, elapsed_ms) in zip(calls, outcomes):
                conversation.add_tool_result(call.id, call.name, result)
                traces.append(
                    ToolTrace(
                        round=round_no,
                        call_id=call.id,
                        tool_name=call.name,
                        arguments=dict(call.arguments) if isinstance(call.arguments, dict) else {},
                        result=result,
                        elapsed_ms=elapsed_ms,
                    )
                )

        logger.warning("No final answer after %d rounds", self._cfg.max_rounds)
        return AdviceResult(
            status=AdviceStatus.EXHAUSTED,
            answer_text=None,
            rounds=self._cfg.max_rounds,
            tool_traces=traces,
            metrics=timer.summary(),
        )

    def get_advice(self, question: str, prior_turns: Sequence[PriorTurn] = ()) -> AdviceResult:
        question = (question or "").strip()
        if not question:
            raise ValueError("CareerAdvisor.get_advice received an empty question.")

        timer = Timer()
        records = timer.measure("context_ms", lambda: self._lookup_context(question))
        prompt = build_prompt(question, records, prior_turns)
        conversation = Conversation.start(prompt)

        result = self.run_loop(conversation, timer)
        return replace(result, context_titles=[r.title for r in records])
