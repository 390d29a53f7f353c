from groq import Groq

from quizforge.core.config import settings

if not settings.GROQ_API_KEY:
    raise SystemExit("❌ GROQ_API_KEY is not set — the API will use the local quiz provider.")

try:
    print("🔌 Connecting to Groq...")
    client = Groq(api_key=settings.GROQ_API_KEY, base_url=settings.GROQ_BASE_URL)

    models = client.models.list()
    available_models = [model.id for model in models.data]

    print("\n✅ Connected. Available models:")
    print("-" * 40)
    for model_id in available_models:
        marker = "  <- primary" if model_id == settings.GROQ_MODEL else (
            "  <- fallback" if model_id == settings.GROQ_FALLBACK_MODEL else ""
        )
        print(f"🌟 {model_id}{marker}")
    print("-" * 40)

    for configured in (settings.GROQ_MODEL, settings.GROQ_FALLBACK_MODEL):
        if configured not in available_models:
            print(f"⚠️  Configured model '{configured}' is not offered by this account.")

    print(f"\n🧪 JSON-mode test call with {settings.GROQ_MODEL}...")
    completion = client.chat.completions.create(
        model=settings.GROQ_MODEL,
        messages=[
            {"role": "system", "content": "Reply with JSON only."},
            {"role": "user", "content": 'Return {"ok": true}'},
        ],
        response_format={"type": "json_object"},
        temperature=0,
    )
    print(f"🚀 Reply: {completion.choices[0].message.content}")

except Exception as e:
    print(f"\n💣 Connection error: {e}")
    print("💡 Check that the key is valid and the network is reachable.")
