from datetime import datetime, timezone

from edulearn.models import User, Message, Question, SiteSetting


class TestUser:

    def test_set_password_hashes(self, ctx):
        user = User(email='a@lms.com', name='A')
        user.set_password('secret')
        assert user.password_hash != 'secret'
        # cost comes from BCRYPT_LOG_ROUNDS, lowered to 4 in conftest
        assert user.password_hash.split('$')[2] == '04'
        assert user.check_password('secret')
        assert not user.check_password('other')


class TestHelpers:

    def test_question_options(self):
        assert Question(options='["a", "b"]').get_options() == ['a', 'b']
        assert Question(options=None).get_options() == []

    def test_message_read_state(self):
        assert not Message().is_read()
        assert Message(read_at=datetime.now(timezone.utc)).is_read()

    def test_setting_typed_value(self):
        assert SiteSetting(value='true', type='boolean').typed_value() is True
        assert SiteSetting(value='False', type='boolean').typed_value() is False
        assert SiteSetting(value='2.5', type='number').typed_value() == 2.5
        assert SiteSetting(value='EduLearn', type='string').typed_value() == 'EduLearn'
