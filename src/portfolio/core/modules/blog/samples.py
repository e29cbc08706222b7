"""Sample posts loaded into a fresh store on startup."""

from typing import Any

SAMPLE_BLOGS: list[dict[str, Any]] = [
    {
        "title": "Understanding Retrieval-Augmented Generation (RAG)",
        "slug": "understanding-rag",
        "content": (
            "Retrieval-Augmented Generation (RAG) is a revolutionary approach that combines the power of large "
            "language models with external knowledge retrieval. This technique allows AI systems to access and "
            "incorporate real-time information from various sources, making responses more accurate and up-to-date..."
        ),
        "excerpt": (
            "Exploring how RAG systems enhance AI responses by combining language models with external knowledge "
            "retrieval for more accurate and contextual outputs."
        ),
        "category": "AI/ML",
        "tags": ["RAG", "NLP", "AI", "Machine Learning"],
        "publishedAt": "2024-01-15T00:00:00Z",
        "readTime": 8,
        "featured": True,
        "isDraft": False,
    },
    {
        "title": "My Journey Through GATE 2025: Tips and Strategies",
        "slug": "gate-2025-journey",
        "content": (
            "Preparing for GATE 2025 was one of the most challenging yet rewarding experiences of my academic "
            "journey. Achieving AIR 3207 in Computer Science and AIR 4032 in Data Science & AI required dedicated "
            "preparation, strategic planning, and consistent effort..."
        ),
        "excerpt": (
            "A detailed account of my GATE 2025 preparation journey, sharing strategies and tips that helped me "
            "achieve top ranks in both CS and DA papers."
        ),
        "category": "Academic",
        "tags": ["GATE", "Computer Science", "Data Science", "Study Tips"],
        "publishedAt": "2024-02-20T00:00:00Z",
        "readTime": 12,
        "featured": True,
        "isDraft": False,
    },
    {
        "title": "Building Conversational AI with LLaMA and LangChain",
        "slug": "conversational-ai-llama-langchain",
        "content": (
            "In this technical deep dive, I'll walk you through the process of building a conversational AI system "
            "using LLaMA-3.1-70b and LangChain. This project demonstrates how to create intelligent document "
            "interaction systems that can understand and respond to user queries..."
        ),
        "excerpt": (
            "A technical guide to building conversational AI systems using LLaMA and LangChain for intelligent "
            "document processing and query handling."
        ),
        "category": "Technical",
        "tags": ["LLaMA", "LangChain", "AI", "NLP", "Python"],
        "publishedAt": "2024-03-10T00:00:00Z",
        "readTime": 15,
        "featured": False,
        "isDraft": False,
    },
]
