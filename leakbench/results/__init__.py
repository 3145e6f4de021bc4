"""Result aggregation, console reports and charts."""
