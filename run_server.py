"""
Entry point for running the API server with uvicorn.
"""

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "author_api:application", factory=True, host="0.0.0.0", port=8000
    )
