"""Configuration models for pairedscan."""

from typing import Literal, get_args

from pydantic import BaseModel, Field, ConfigDict, field_validator, ValidationInfo

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["simple", "detailed", "json"]

# Shared with the --log-level choices
LOG_LEVELS = get_args(LogLevel)


class LoggingConfig(BaseModel):
    """Diagnostics settings. Logs never go to stdout, which carries the paired list."""

    model_config = ConfigDict(extra='forbid')

    level: LogLevel = Field(default="INFO", description="Minimum level written to stderr")
    format: LogFormat = Field(default="simple", description="stderr line format")
    file: str | None = Field(
        default=None,
        description="Also write JSON log lines to this file (rotated)"
    )

    @field_validator('level', 'format', mode='before')
    @classmethod
    def normalize_case(cls, v: str, info: ValidationInfo) -> str:
        """Accept level and format in any case."""
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "level" else v.lower()


class PairingConfig(BaseModel):
    """Run intent for one scan: where to look and how to pair.

    Prefix consistency (shared vs. individual prefixes) is checked when the
    mate patterns are inferred, not here.
    """
    
    model_config = ConfigDict(extra='forbid', frozen=True)
    
    root: str = Field(
        default=".",
        description="Root folder to scan"
    )
    recursive: bool = Field(
        default=False,
        description="Scan the root folder and all of its descendants"
    )
    gzipped: bool = Field(
        default=False,
        description="Look for .fq.gz/.fastq.gz instead of .fq/.fastq"
    )
    interleave: bool = Field(
        default=False,
        description="Emit each mate-1 file followed by its mate-2 file"
    )
    prefix_1: str | None = Field(
        default=None,
        description="Custom mate-1 token (regular expression fragment)"
    )
    prefix_2: str | None = Field(
        default=None,
        description="Custom mate-2 token (regular expression fragment)"
    )
    prefix_paired: str | None = Field(
        default=None,
        description="Shared token; the placeholder 'X' stands for the mate number"
    )
    absolute: bool = Field(
        default=False,
        description="Resolve every path to its absolute form"
    )


class PairedScanConfig(BaseModel):
    """Root configuration for pairedscan."""
    
    model_config = ConfigDict(extra='forbid')
    
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    pairing: PairingConfig = Field(default_factory=PairingConfig)
