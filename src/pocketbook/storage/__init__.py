"""Persistence: the JSON record store and typed record IO."""
