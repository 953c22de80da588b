"""Sample documents for pipeline tests."""

ML_TEXT = """Date: 2025-01-01
Version: 1.2
Author: Research Team

Machine learning is a subset of artificial intelligence that focuses on algorithms which learn patterns from data.

Supervised learning uses labelled examples to fit a model that maps inputs to outputs, for example classifying emails as spam.

Unsupervised learning finds structure in unlabelled data, such as clusters of similar customers or latent topics in text."""

DL_TEXT = """Deep learning uses neural networks with many layers to learn hierarchical representations of data.

Convolutional networks excel at images because their filters share weights across spatial positions of the input.

Transformers rely on attention mechanisms and now dominate natural language processing and many vision benchmarks."""

RL_TEXT = """Reinforcement learning trains agents to act in an environment by maximizing cumulative reward over time.

Policy gradient methods adjust the parameters of a policy directly in the direction that increases expected return."""


def make_documents(*texts: str) -> list[dict]:
    return [
        {"text": text, "metadata": {"source": f"doc{i}.txt"}}
        for i, text in enumerate(texts)
    ]
