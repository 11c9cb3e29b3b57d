"""
Gemini relay package.

Provides:
- A FastAPI handler that authenticates a caller against Supabase Auth
- A single pass-through call to the Gemini generateContent endpoint
"""
