"""tests.test_cli module"""
