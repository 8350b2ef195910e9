"""Application entry point for FastAPI server."""
import uvicorn

if __name__ == "__main__":
    print("\n" + "="*60)
    print("  Segment Voices Gateway v1.0")
    print("="*60)
    print("\nEndpoints:")
    print("  POST /ask               - Ask a question as a respondent profile")
    print("  POST /api/schedule      - Relay a scheduling request")
    print("  GET  /health            - Health check")
    print("\nAPI Docs: http://localhost:8000/docs")
    print("="*60 + "\n")

    # Use import string format to enable reload mode
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
