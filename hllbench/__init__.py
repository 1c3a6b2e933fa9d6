"""HyperLogLog sketches, seeded hashes and random string streams for accuracy experiments."""

__version__ = "0.1.0"