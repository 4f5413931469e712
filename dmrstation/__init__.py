"""DMR network station building blocks: Homebrew protocol, DMR error correction and AMBE frames."""

__version__ = "0.1.0"