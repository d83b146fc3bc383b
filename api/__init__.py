"""Serverless function entry points."""
