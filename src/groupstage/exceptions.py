"""Exceptions for use in the Group Stage Engine"""

# Group Stage Engine
# Copyright (C) 2025  Group Stage Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class GroupStageEngineException(Exception):
    """Base exception for all Group Stage Engine errors.

    All custom exceptions in the library inherit from this class, so a
    calling layer can translate every contract violation with one except clause.
    """

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GroupStageEngineException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when group stage configuration data is invalid."""

    pass


class InvalidGroupCountException(ConfigurationException):
    """Raised when the requested number of groups cannot be built."""

    pass


# ========== Participant Exceptions ==========


class ParticipantException(GroupStageEngineException):
    """Base exception for participant-related errors."""

    pass


class EmptyParticipantsException(ParticipantException):
    """Raised when there are no participants to seed into groups."""

    pass


class DuplicateParticipantException(ParticipantException):
    """Raised when the same participant id appears more than once."""

    pass


class ParticipantNotFoundException(ParticipantException):
    """Raised when a participant is not where it was expected."""

    pass


# ========== Group Exceptions ==========


class GroupException(GroupStageEngineException):
    """Base exception for group-related errors."""

    pass


class GroupNotFoundException(GroupException):
    """Raised when a requested group does not exist."""

    pass


class GroupBalanceException(GroupException):
    """Raised when an edit would leave group sizes more than one apart."""

    pass


class InvalidGroupEditException(GroupException):
    """Raised when a group edit request is malformed."""

    pass


# ========== Group Stage Exceptions ==========


class GroupStageStateException(GroupStageEngineException):
    """Raised when the group stage is in an invalid state for the requested operation."""

    pass


# ========== Result Exceptions ==========


class ResultException(GroupStageEngineException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., winner is not in the match)."""

    pass


class InvalidScoreException(ResultException):
    """Raised when a score string cannot be parsed."""

    pass


class DuplicateResultException(ResultException):
    """Raised when attempting to record a result that already exists."""

    pass


class MatchNotFoundException(ResultException):
    """Raised when a requested match cannot be found."""

    pass
