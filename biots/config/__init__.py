"""Configuration package for the biots simulation.

Constants are split by concern: organism model (``biot``), population
orchestration (``simulation``) and display defaults (``display``). The
``simulation_config`` module bundles the runtime-tunable values into
dataclasses.
"""
