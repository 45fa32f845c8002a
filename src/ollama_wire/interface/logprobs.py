"""Token log-probabilities: Ollama completion shape to a provider-agnostic one."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OllamaCompletionLogProbs(BaseModel):
    """Raw ``logprobs`` fragment of an Ollama completion response.

    The three lists are index-aligned; ``top_logprobs`` is null when the
    request did not ask for candidates.
    """

    tokens: list[str]
    token_logprobs: list[float]
    top_logprobs: list[dict[str, float]] | None = None


class TopLogProb(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    logprob: float


class LogProb(BaseModel):
    """Log-probability of one generated token plus its top candidates."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str
    logprob: float
    top_logprobs: list[TopLogProb] = Field(default_factory=list, alias="topLogprobs")


def map_ollama_completion_logprobs(
    logprobs: OllamaCompletionLogProbs | dict[str, Any] | None,
) -> list[LogProb] | None:
    """Map a completion ``logprobs`` fragment to one :class:`LogProb` per token.

    Returns ``None`` when the response carried no log-probabilities.
    Candidates keep the key order of the source mapping.
    """
    if logprobs is None:
        return None
    if isinstance(logprobs, dict):
        logprobs = OllamaCompletionLogProbs.model_validate(logprobs)

    top = logprobs.top_logprobs
    return [
        LogProb(
            token=token,
            logprob=logprobs.token_logprobs[index],
            top_logprobs=(
                [TopLogProb(token=t, logprob=lp) for t, lp in top[index].items()]
                if top is not None
                else []
            ),
        )
        for index, token in enumerate(logprobs.tokens)
    ]
