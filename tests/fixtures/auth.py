# tests/fixtures/auth.py
# MockIdentityProvider maps "mock_token_<x>" to user "mock_user_<x>".
ALICE = {"Authorization": "Bearer mock_token_alice"}
BOB = {"Authorization": "Bearer mock_token_bob"}
ADMIN = {"Authorization": "Bearer mock_token_admin"}
