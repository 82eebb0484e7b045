import pytest

from mb8.role import JUDGE, Role


def test_default_role_is_judge():
    assert Role().is_judge() is True


def test_judge_constant_equals_default():
    assert JUDGE == Role()


def test_bot_role_is_not_judge():
    role = Role(bot=2)
    assert role.is_judge() is False
    assert role.bot == 2


def test_bot_zero_is_not_judge():
    assert Role(bot=0).is_judge() is False


def test_roles_compare_by_value():
    assert Role(bot=1) == Role(bot=1)
    assert Role(bot=1) != Role(bot=3)
    assert hash(Role(bot=1)) == hash(Role(bot=1))


@pytest.mark.parametrize("bot", [-1, 256])
def test_bot_id_out_of_range(bot):
    with pytest.raises(ValueError):
        Role(bot=bot)