"""Classifier profile utilities for configuring sentiment backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping


@dataclass(frozen=True)
class ClassifierProfile:
    """Pre-configured sentiment classifier backend and model settings."""

    name: str
    description: str
    backend: str
    model_id: str | None = None
    label_map: Mapping[str, str] = field(default_factory=dict)
    endpoint: str | None = None


def _default_profiles() -> Dict[str, ClassifierProfile]:
    """Return the built-in classifier profile registry."""

    return {
        "balanced": ClassifierProfile(
            name="balanced",
            description=(
                "Three-way RoBERTa model trained on tweets; good default for short English text."
            ),
            backend="huggingface",
            model_id="cardiffnlp/twitter-roberta-base-sentiment-latest",
            label_map={"LABEL_0": "negative", "LABEL_1": "neutral", "LABEL_2": "positive"},
        ),
        "light": ClassifierProfile(
            name="light",
            description=(
                "Small binary DistilBERT model; never reports neutral or mixed sentiment."
            ),
            backend="huggingface",
            model_id="distilbert-base-uncased-finetuned-sst-2-english",
        ),
        "multilingual": ClassifierProfile(
            name="multilingual",
            description=(
                "Distilled multilingual model covering the major European and Asian languages."
            ),
            backend="huggingface",
            model_id="lxyuan/distilbert-base-multilingual-cased-sentiments-student",
        ),
        "remote": ClassifierProfile(
            name="remote",
            description=(
                "Cloud sentiment endpoint returning Positive/Negative/Neutral/Mixed scores."
            ),
            backend="http",
        ),
    }


_PROFILES: Dict[str, ClassifierProfile] = _default_profiles()

DEFAULT_PROFILE_NAME = "balanced"


def list_classifier_profiles() -> List[str]:
    """Return the sorted list of available profile names."""

    return sorted(_PROFILES.keys())


def get_classifier_profile(name: str) -> ClassifierProfile:
    try:
        return _PROFILES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown classifier profile: {name}") from exc


def describe_classifier_profiles() -> List[str]:
    """Return human-readable lines describing each profile."""

    lines: List[str] = []
    for name in list_classifier_profiles():
        profile = _PROFILES[name]
        lines.append(f"{name}: {profile.description}")
        lines.append(f"  Backend: {profile.backend}")
        if profile.model_id:
            lines.append(f"  Model: {profile.model_id}")
        if profile.endpoint:
            lines.append(f"  Endpoint: {profile.endpoint}")
    return lines


def apply_profile_defaults(namespace, profile: ClassifierProfile, fields: Iterable[str]) -> None:
    """Populate missing attributes on a namespace from the provided profile."""

    for name in fields:
        if getattr(namespace, name, None) is not None:
            continue
        setattr(namespace, name, getattr(profile, name))
