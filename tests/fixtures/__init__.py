"""Domain code exercised by the test suite."""
