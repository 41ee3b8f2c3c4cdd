"""
Narrative text for newly preserved artifacts, generated with AWS Bedrock.

Provides:
- ask_llm(): single Bedrock (Nova messages API) text invocation
- build_narrative_prompt(): the archivist prompt for one artifact
- generate_narrative(): prompt + invoke + fallback; never raises
"""

from __future__ import annotations

import json
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from eterna.aws.clients import get_bedrock_runtime
from eterna.logutil import clogger
from eterna.settings import BEDROCK_MODEL_ID, BEDROCK_REGION, NARRATIVE_ENABLED

NARRATIVE_MAX_TOKENS = 150

# Used whenever the model is disabled, unreachable, or says nothing useful
FALLBACK_NARRATIVE = "This artifact hums with a quiet energy, hoping not to be forgotten."

# Shorter outputs are treated as a failed generation
MIN_NARRATIVE_CHARS = 10


# ====================================================================================
# ASK LLM (BEDROCK MODEL INVOCATION)
# ====================================================================================
def ask_llm(
    prompt: str,
    max_tokens: int = NARRATIVE_MAX_TOKENS,
    temperature: float = 0.7,
) -> Optional[str]:
    """Invoke a Bedrock model and return its text output, or None on failure."""
    request_body = {
        "messages": [{"role": "user", "content": [{"text": prompt}]}],
        "inferenceConfig": {
            "max_new_tokens": max_tokens,
            "temperature": temperature,
            "stopSequences": [],
        },
    }

    try:
        client = get_bedrock_runtime(region=BEDROCK_REGION)
        clogger.debug(f"[llm] Invoking Bedrock model '{BEDROCK_MODEL_ID}'")
        response = client.invoke_model(
            modelId=BEDROCK_MODEL_ID,
            body=json.dumps(request_body),
        )
        raw_text = response["body"].read().decode("utf-8")
        if not raw_text:
            clogger.error("[llm] Empty raw response body from Bedrock")
            return None

        parsed = json.loads(raw_text)
        # Nova response format: output.message.content[0].text
        return parsed["output"]["message"]["content"][0]["text"]

    except (ClientError, BotoCoreError) as e:
        clogger.error(f"[llm] Bedrock request failed: {e}")
    except (KeyError, IndexError, TypeError, json.JSONDecodeError) as e:
        clogger.error(f"[llm] Unexpected Bedrock response schema: {e}")

    return None


def build_narrative_prompt(title: str, artifact_type: str, description: str) -> str:
    return (
        "You are the archivist of Eterna, a digital museum of human memory. "
        "Write a short (2-3 sentences) poetic and somewhat melancholic narrative "
        "about the following artifact being preserved before it fades into obscurity.\n"
        f"Artifact Title: {title}\n"
        f"Type: {artifact_type}\n"
        f"Description: {description}"
    )


def generate_narrative(title: str, artifact_type: str, description: str) -> str:
    """
    Narrative for a new artifact. Falls back to a fixed sentence on any
    failure so that artifact creation never depends on Bedrock.
    """
    if not NARRATIVE_ENABLED:
        return FALLBACK_NARRATIVE

    text = ask_llm(build_narrative_prompt(title, artifact_type, description))
    if not text or len(text.strip()) < MIN_NARRATIVE_CHARS:
        clogger.warning(f"[llm] No usable narrative for '{title}', using fallback")
        return FALLBACK_NARRATIVE

    return text.strip()
