"""Statistical engine: coercion, inference, statistics, binning, charts."""
