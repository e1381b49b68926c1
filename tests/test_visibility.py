"""
Tests for record visibility: restrictions, privacy of living people and linked records
"""

from unittest.mock import patch

import pytest

from webtrees.database.models import Family, GedcomRecord, Individual, Media
from webtrees.shared.privacy import PRIV_HIDE, PRIV_NONE, PRIV_PRIVATE, PRIV_USER


LIVING = '1 NAME Living /Person/\n1 BIRT\n2 DATE 2001'
DEAD = '1 NAME Dead /Person/\n1 BIRT\n2 DATE 1801\n1 DEAT Y'


class TestRestrictions:
    """Test RESN values, default restrictions and the privacy switch"""

    def test_unrestricted_media_visible_to_visitors(self, add_record):
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        assert media.can_show(PRIV_PRIVATE)

    @pytest.mark.parametrize('resn,visitor,member,manager', [
        ('none', True, True, True),
        ('privacy', False, True, True),
        ('confidential', False, False, True),
    ])
    def test_record_resn(self, add_record, resn, visitor, member, manager):
        media = add_record(Media, 'M1', f'1 FILE a.jpg\n1 RESN {resn}')
        assert media.can_show(PRIV_PRIVATE) is visitor
        assert media.can_show(PRIV_USER) is member
        assert media.can_show(PRIV_NONE) is manager

    def test_hide_level_bypasses_restrictions(self, add_record):
        media = add_record(Media, 'M1', '1 FILE a.jpg\n1 RESN confidential')
        assert media.can_show(PRIV_HIDE)

    def test_privacy_disabled_shows_everything(self, add_record, tree, set_preference):
        set_preference(tree, 'HIDE_LIVE_PEOPLE', '0')
        media = add_record(Media, 'M1', '1 FILE a.jpg\n1 RESN confidential')
        assert media.can_show(PRIV_PRIVATE)

    def test_default_restriction_by_record_type(self, add_record, add_resn):
        add_resn('privacy', tag_type='OBJE')
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        assert not media.can_show(PRIV_PRIVATE)
        assert media.can_show(PRIV_USER)

    def test_default_restriction_by_record(self, add_record, add_resn):
        add_resn('none', xref='I1')
        individual = add_record(Individual, 'I1', LIVING)
        assert individual.can_show(PRIV_PRIVATE)

    def test_decision_cached_per_access_level(self, add_record):
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        with patch.object(GedcomRecord, 'can_show_record', return_value=True) as mock_rule:
            media.can_show(PRIV_PRIVATE)
            media.can_show(PRIV_PRIVATE)
            media.can_show(PRIV_USER)
        assert mock_rule.call_count == 2


class TestIndividualPrivacy:
    """Test the living/dead rule for individuals"""

    def test_living_hidden_from_visitors(self, add_record):
        individual = add_record(Individual, 'I1', LIVING)
        assert not individual.can_show(PRIV_PRIVATE)
        assert individual.can_show(PRIV_USER)

    def test_dead_visible_to_visitors(self, add_record):
        individual = add_record(Individual, 'I1', DEAD)
        assert individual.is_dead()
        assert individual.can_show(PRIV_PRIVATE)

    def test_old_birth_counts_as_dead(self, add_record):
        individual = add_record(Individual, 'I1', '1 NAME Old /One/\n1 BIRT\n2 DATE ABT 1750')
        assert individual.is_dead()

    @pytest.mark.parametrize('max_alive_age', ['', 'old'])
    def test_unreadable_max_alive_age_falls_back(self, add_record, tree, set_preference, max_alive_age):
        set_preference(tree, 'MAX_ALIVE_AGE', max_alive_age)
        assert add_record(Individual, 'I1', '1 NAME Old /One/\n1 BIRT\n2 DATE 1801').is_dead()
        assert not add_record(Individual, 'I2', LIVING).is_dead()

    def test_show_dead_people_setting(self, add_record, tree, set_preference):
        set_preference(tree, 'SHOW_DEAD_PEOPLE', str(PRIV_USER))
        individual = add_record(Individual, 'I1', DEAD)
        assert not individual.can_show(PRIV_PRIVATE)
        assert individual.can_show(PRIV_USER)

    def test_display_name_of_private_individual(self, add_record):
        individual = add_record(Individual, 'I1', LIVING)
        assert individual.get_display_name(PRIV_PRIVATE) == 'Private'
        assert individual.get_display_name(PRIV_USER) == 'Living Person'


class TestFamilyPrivacy:
    """Test that families follow their members"""

    def test_family_with_living_member_hidden(self, add_record):
        add_record(Individual, 'I1', DEAD)
        add_record(Individual, 'I2', LIVING)
        family = add_record(Family, 'F1', '1 HUSB @I1@\n1 CHIL @I2@')
        assert not family.can_show(PRIV_PRIVATE)
        assert family.can_show(PRIV_USER)

    def test_family_of_dead_members_visible(self, add_record):
        add_record(Individual, 'I1', DEAD)
        family = add_record(Family, 'F1', '1 HUSB @I1@\n1 WIFE @I9@')
        assert family.can_show(PRIV_PRIVATE)


class TestLinkedMediaPrivacy:
    """Test that media objects inherit the privacy of records linking to them"""

    def test_media_linked_from_private_individual_hidden(self, add_record, add_link):
        add_record(Individual, 'I1', f'{LIVING}\n1 OBJE @M1@')
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('I1', 'OBJE', 'M1')
        assert not media.can_show(PRIV_PRIVATE)
        assert media.can_show(PRIV_USER)

    def test_media_linked_from_visible_individual_shown(self, add_record, add_link):
        add_record(Individual, 'I1', DEAD)
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('I1', 'OBJE', 'M1')
        assert media.can_show(PRIV_PRIVATE)

    def test_one_private_link_is_enough(self, add_record, add_link):
        add_record(Individual, 'I1', DEAD)
        add_record(Individual, 'I2', LIVING)
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('I1', 'OBJE', 'M1')
        add_link('I2', 'OBJE', 'M1')
        assert not media.can_show(PRIV_PRIVATE)

    def test_dangling_link_ignored(self, add_record, add_link):
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('X99', 'OBJE', 'M1')
        assert media.can_show(PRIV_PRIVATE)

    def test_privacy_propagates_through_families(self, add_record, add_link):
        add_record(Individual, 'I1', DEAD)
        add_record(Individual, 'I2', LIVING)
        add_record(Family, 'F1', '1 HUSB @I1@\n1 CHIL @I2@\n1 OBJE @M1@')
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('F1', 'OBJE', 'M1')
        assert not media.can_show(PRIV_PRIVATE)

    def test_managers_see_linked_media(self, add_record, add_link):
        add_record(Individual, 'I1', f'{LIVING}\n1 RESN confidential')
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('I1', 'OBJE', 'M1')
        assert not media.can_show(PRIV_USER)
        assert media.can_show(PRIV_NONE)

    def test_own_restriction_still_applies(self, add_record, add_link):
        add_record(Individual, 'I1', DEAD)
        media = add_record(Media, 'M1', '1 FILE a.jpg\n1 RESN privacy')
        add_link('I1', 'OBJE', 'M1')
        assert not media.can_show(PRIV_PRIVATE)

    def test_self_link_does_not_recurse(self, add_record, add_link):
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_link('M1', 'OBJE', 'M1')
        assert media.can_show(PRIV_PRIVATE)

    def test_link_cycle_still_hidden_by_private_record(self, add_record, add_link):
        add_record(Individual, 'I1', LIVING)
        media = add_record(Media, 'M1', '1 FILE a.jpg')
        add_record(Media, 'M2', '1 FILE b.jpg')
        add_link('M1', 'OBJE', 'M2')
        add_link('M2', 'OBJE', 'M1')
        add_link('I1', 'OBJE', 'M2')
        assert not media.can_show(PRIV_PRIVATE)
        assert media.can_show(PRIV_USER)
