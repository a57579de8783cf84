"""Test for __main__.py module."""

from unittest.mock import patch


def test_main_module():
    """Test that __main__.py can be imported and calls cli."""
    with patch('qodana_runner.cli.main.cli') as mock_cli:
        import qodana_runner.__main__
        # CLI should not be called on import
        mock_cli.assert_not_called()
