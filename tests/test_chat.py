"""
Tests for chat history, conversation summaries and the companion chat endpoint.
"""

from lifepulse.repository import conversation_title
from lifepulse.seed import SAMPLE_CONVERSATION_ID
from lifepulse.services.companion import FALLBACK_REPLY


class TestConversationTitle:
    """Titles derived from the first user message"""

    def test_short_message_is_kept(self):
        assert conversation_title("Feeling dizzy") == "Feeling dizzy"

    def test_thirty_characters_is_not_truncated(self):
        message = "x" * 30
        assert conversation_title(message) == message

    def test_long_message_is_truncated(self):
        title = conversation_title("I've been feeling a bit tired today. Maybe that's why")
        assert title == "I've been feeling a bit tir..."
        assert len(title) == 30

    def test_missing_message(self):
        assert conversation_title(None) == "New Conversation"


class TestChatHistory:
    """Stored messages and conversations"""

    def test_messages_require_conversation_id(self, auth_client):
        response = auth_client.get("/api/chat/messages")
        assert response.status_code == 400
        assert response.json() == {"message": "Conversation ID required"}

    def test_seeded_conversation_in_order(self, auth_client):
        response = auth_client.get("/api/chat/messages", params={"conversationId": SAMPLE_CONVERSATION_ID})
        messages = response.json()
        assert len(messages) == 5
        assert [m["sender"] for m in messages] == ["ai", "user", "ai", "user", "ai"]
        timestamps = [m["timestamp"] for m in messages]
        assert timestamps == sorted(timestamps)

    def test_conversation_summary(self, auth_client):
        conversations = auth_client.get("/api/chat/conversations").json()
        assert conversations == [{"id": SAMPLE_CONVERSATION_ID, "title": "I've been feeling a bit tir..."}]

    def test_post_message(self, auth_client):
        response = auth_client.post("/api/chat/messages", json={
            "content": "Thanks!",
            "sender": "user",
            "conversationId": SAMPLE_CONVERSATION_ID,
        })
        assert response.status_code == 201
        assert response.json()["conversationId"] == SAMPLE_CONVERSATION_ID

    def test_unknown_sender_is_rejected(self, auth_client):
        response = auth_client.post("/api/chat/messages", json={
            "content": "Hi",
            "sender": "robot",
            "conversationId": SAMPLE_CONVERSATION_ID,
        })
        assert response.status_code == 400

    def test_recent_returns_latest_conversation(self, auth_client):
        auth_client.post("/api/chat/messages", json={
            "content": "New topic",
            "sender": "user",
            "conversationId": "conv999",
        })
        recent = auth_client.get("/api/chat/messages/recent").json()
        assert [m["content"] for m in recent] == ["New topic"]

    def test_conversations_sorted_by_id(self, auth_client):
        auth_client.post("/api/chat/messages", json={
            "content": "Hello there",
            "sender": "user",
            "conversationId": "conv000",
        })
        ids = [c["id"] for c in auth_client.get("/api/chat/conversations").json()]
        assert ids == ["conv000", SAMPLE_CONVERSATION_ID]

    def test_conversations_use_code_point_order(self, auth_client):
        for conversation_id in ("conv-b", "Conv-c", "conv-A"):
            auth_client.post("/api/chat/messages", json={
                "content": "Checking in",
                "sender": "user",
                "conversationId": conversation_id,
            })
        ids = [c["id"] for c in auth_client.get("/api/chat/conversations").json()]
        assert ids == ["Conv-c", "conv-A", "conv-b", SAMPLE_CONVERSATION_ID]

    def test_conversation_without_user_message(self, auth_client):
        auth_client.post("/api/chat/messages", json={
            "content": "Welcome back!",
            "sender": "ai",
            "conversationId": "conv777",
        })
        titles = {c["id"]: c["title"] for c in auth_client.get("/api/chat/conversations").json()}
        assert titles["conv777"] == "New Conversation"


class TestCompanionChat:
    """Keyword replies stored alongside the user's message"""

    def test_reply_is_stored_in_same_conversation(self, auth_client):
        response = auth_client.post("/api/ai/chat", json={
            "message": "I have a headache",
            "conversationId": SAMPLE_CONVERSATION_ID,
        })
        assert response.status_code == 201
        body = response.json()
        assert body["userMessage"]["sender"] == "user"
        assert body["reply"]["sender"] == "ai"
        assert body["reply"]["content"].startswith("For headaches")

        messages = auth_client.get(
            "/api/chat/messages", params={"conversationId": SAMPLE_CONVERSATION_ID}
        ).json()
        assert len(messages) == 7
        assert messages[-1]["id"] == body["reply"]["id"]

    def test_new_conversation_is_started(self, auth_client):
        body = auth_client.post("/api/ai/chat", json={"message": "What should I eat?"}).json()
        conversation_id = body["userMessage"]["conversationId"]
        assert conversation_id != SAMPLE_CONVERSATION_ID
        assert body["reply"]["conversationId"] == conversation_id
        recent = auth_client.get("/api/chat/messages/recent").json()
        assert [m["id"] for m in recent] == [body["userMessage"]["id"], body["reply"]["id"]]

    def test_unmatched_message_gets_fallback(self, auth_client):
        body = auth_client.post("/api/ai/chat", json={"message": "Tell me about vitamins"}).json()
        assert body["reply"]["content"] == FALLBACK_REPLY
