"""
Test suite for the production planning wizard.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_plan_editor.py -v
"""
