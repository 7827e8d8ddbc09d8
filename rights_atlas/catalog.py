"""Static catalog of the 30 articles of the Universal Declaration of Human Rights."""

from __future__ import annotations

from rights_atlas.models.right import Right, RightCategory

C = RightCategory

_ENTRIES = [
    ("Freedom and Equality in Dignity", "All human beings are born free and equal in dignity and rights.", C.CIVIL),
    ("Freedom from Discrimination", "Everyone is entitled to all rights without distinction of any kind.", C.CIVIL),
    ("Right to Life, Liberty and Security", "Everyone has the right to life, liberty and security of person.", C.CIVIL),
    ("Freedom from Slavery", "No one shall be held in slavery or servitude.", C.CIVIL),
    ("Freedom from Torture", "No one shall be subjected to torture or cruel, inhuman or degrading treatment.", C.CIVIL),
    ("Right to Recognition Before the Law", "Everyone has the right to recognition everywhere as a person before the law.", C.CIVIL),
    ("Equality Before the Law", "All are equal before the law and entitled to its equal protection.", C.CIVIL),
    ("Right to an Effective Remedy", "Everyone has the right to a remedy for acts violating their fundamental rights.", C.CIVIL),
    ("Freedom from Arbitrary Detention", "No one shall be subjected to arbitrary arrest, detention or exile.", C.CIVIL),
    ("Right to a Fair Trial", "Everyone is entitled to a fair and public hearing by an independent tribunal.", C.CIVIL),
    ("Presumption of Innocence", "Everyone charged with an offence is presumed innocent until proved guilty.", C.CIVIL),
    ("Right to Privacy", "No one shall be subjected to arbitrary interference with privacy, family, home or correspondence.", C.CIVIL),
    ("Freedom of Movement", "Everyone has the right to move freely, to leave any country and to return.", C.CIVIL),
    ("Right to Asylum", "Everyone has the right to seek and enjoy asylum from persecution.", C.CIVIL),
    ("Right to a Nationality", "Everyone has the right to a nationality and to change it.", C.CIVIL),
    ("Right to Marry and Found a Family", "Adults have the right to marry with free and full consent and to found a family.", C.SOCIAL),
    ("Right to Own Property", "Everyone has the right to own property and not be arbitrarily deprived of it.", C.ECONOMIC),
    ("Freedom of Thought, Conscience and Religion", "Everyone has the right to freedom of thought, conscience and religion.", C.CIVIL),
    ("Freedom of Opinion and Expression", "Everyone has the right to hold opinions and to seek, receive and impart information.", C.POLITICAL),
    ("Freedom of Assembly and Association", "Everyone has the right to peaceful assembly and association.", C.POLITICAL),
    ("Right to Participate in Government", "Everyone has the right to take part in government and in genuine elections.", C.POLITICAL),
    ("Right to Social Security", "Everyone has the right to social security and the realization of economic, social and cultural rights.", C.SOCIAL),
    ("Right to Work", "Everyone has the right to work, to just conditions, equal pay and to join trade unions.", C.ECONOMIC),
    ("Right to Rest and Leisure", "Everyone has the right to rest, leisure and reasonable limitation of working hours.", C.ECONOMIC),
    ("Right to an Adequate Standard of Living", "Everyone has the right to food, clothing, housing, medical care and social services.", C.SOCIAL),
    ("Right to Education", "Everyone has the right to education, free at least in the elementary stages.", C.SOCIAL),
    ("Right to Cultural Life", "Everyone has the right to participate in cultural life and share in scientific advancement.", C.CULTURAL),
    ("Right to a Social and International Order", "Everyone is entitled to an order in which these rights can be fully realized.", C.SOCIAL),
    ("Duties to the Community", "Everyone has duties to the community; rights are limited only as determined by law.", C.SOCIAL),
    ("No Destruction of Rights", "Nothing in the Declaration may be interpreted to justify destroying these rights.", C.CIVIL),
]

RIGHTS: tuple[Right, ...] = tuple(
    Right(id=str(i), name=name, summary=summary, category=category)
    for i, (name, summary, category) in enumerate(_ENTRIES, 1)
)

_BY_ID = {r.id: r for r in RIGHTS}


def all_rights() -> tuple[Right, ...]:
    return RIGHTS


def get_right(right_id: str) -> Right | None:
    return _BY_ID.get(right_id)
