"""
AskPDF: retrieval-augmented chat over uploaded PDF documents.

Each upload becomes a session whose passages are indexed under the session id
and whose questions are answered from those passages plus recent history.
"""

__version__ = "0.1.0"
