"""
Integration Tests - Component Interactions

Integration test suite for the flubr agent.
Tests verify component wiring with a mocked Slack app and Web API.

Test files:
- test_flubr_agent_local.py: Handler registration, dispatch and Socket Mode lifecycle
"""
