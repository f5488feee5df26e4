import pytest
from report_relay.gateway.server import create_app

TEST_API_KEY = "test-ai-key"
TEST_API_URL = "http://upstream.test/api/v1/chat/completions"

@pytest.fixture
def app():
    app = create_app({
        "AI_API_KEY": TEST_API_KEY,
        "AI_API_URL": TEST_API_URL,
        "AI_MODEL": "text-model",
        "AI_VISION_MODEL": "vision-model",
        "AI_API_TIMEOUT": None,
    })
    app.config["TESTING"] = True
    return app

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def mock_upstream(mocker):
    """
    Mocks requests.post for the AI API.
    Call the returned function to set the response: reply(content) or reply(status=500, text="boom").
    """
    mock_post = mocker.patch("report_relay.ai_proxy.upstream.requests.post")

    def reply(content=None, status=200, text=""):
        mock_response = mocker.Mock()
        mock_response.status_code = status
        mock_response.text = text
        mock_response.json.return_value = {
            "choices": [{"message": {"role": "assistant", "content": content}}]
        }
        mock_post.return_value = mock_response
        return mock_post

    reply('{"a":1}')
    return reply

