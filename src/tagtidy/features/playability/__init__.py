"""
Summary: Public surface for playability probing.
Why: Expose the probes, their ports and the combination rule together.
"""

from .ffprobe import FfprobeDecoderProbe, resolve_decoder_probe
from .metadata_probe import MetadataDurationProbe
from .ports import DecoderProbePort, PlayabilityProbePort
from .verdict import combine_verdicts

__all__ = [
    "DecoderProbePort",
    "FfprobeDecoderProbe",
    "MetadataDurationProbe",
    "PlayabilityProbePort",
    "combine_verdicts",
    "resolve_decoder_probe",
]
