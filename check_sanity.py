print("Checking imports...")
try:
    import groq
    print(f"Groq SDK: OK ({groq.__version__})")
except ImportError as e:
    print(f"Groq SDK Error: {e}")

try:
    from quizforge.core.config import settings
    print(f"Settings: OK (environment={settings.ENVIRONMENT}, provider={settings.provider_name})")
except Exception as e:
    print(f"Settings Error: {e}")

try:
    from quizforge.main import app
    print("App Import: OK")
except Exception as e:
    print(f"App Import Error: {e}")

print("Done.")
