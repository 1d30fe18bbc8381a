from letter_worker.summarization.base import BaseSummarizer
from letter_worker.summarization.factory import SummarizerFactory
from letter_worker.summarization.summarizer import Summarizer

__all__ = ["BaseSummarizer", "Summarizer", "SummarizerFactory"]
