"""
Summary: Combine playability signals into one verdict.
Why: The external decoder, when it has an opinion, overrides the metadata probe.
"""

from __future__ import annotations

from pathlib import Path

from tagtidy.platform.logging import logger


def combine_verdicts(
    metadata_verdict: bool,
    decoder_verdict: bool | None,
    *,
    file_path: Path | None = None,
) -> bool:
    """Return the decoder verdict when present, otherwise the metadata verdict."""

    if decoder_verdict is None:
        return metadata_verdict
    if decoder_verdict != metadata_verdict:
        # TODO: surface disagreements in the plan once there is a flag for it.
        logger.debug(
            "Probes disagree for %s (metadata=%s, decoder=%s); using decoder",
            file_path,
            metadata_verdict,
            decoder_verdict,
        )
    return decoder_verdict


__all__ = ["combine_verdicts"]
