"""Core processing modules package.

This package contains the contract generation pipeline:
- contracts: Form model, contract types and static template tables
- normalization: Text sanitization and capitalization helpers
- expansion: Vague input expansion into clause text
- validation: Form sanitizer and per-type validation rules
- assembly: Numbered document model and the contract builders
- export: Section parsing and plain-text export
- pipeline: End-to-end orchestration of the stages above
"""
