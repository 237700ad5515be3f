"""Reinforcement learning scripts for the bubble shooter environment"""
