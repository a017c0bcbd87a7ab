"""Procedure catalog shared with the remote graph engine.

The engine understands a fixed vocabulary of named procedures, each taking
a parameter map keyed by the constants in ``Param``. There is no generated
schema: both sides must agree on these strings.
"""

from __future__ import annotations

from enum import Enum


class Procedure(str, Enum):
    """Named procedures exposed by the remote graph engine."""

    # people
    GET_PEOPLE = "shindig.people.get"
    GET_PERSON = "shindig.person.get"
    GET_ALL_PEOPLE = "shindig.people.all"
    GET_PEOPLE_BY_SKILL = "shindig.people.bySkill"
    CREATE_PERSON = "shindig.person.create"
    UPDATE_PERSON = "shindig.person.update"
    DELETE_PERSON = "shindig.person.delete"

    # friendships
    GET_FRIEND_REQUESTS = "shindig.friends.requests"
    REQUEST_FRIENDSHIP = "shindig.friends.request"
    DENY_FRIENDSHIP = "shindig.friends.deny"

    # groups
    GET_GROUPS = "shindig.groups.get"

    # messages
    GET_MESSAGE_COLLECTIONS = "shindig.messageCollections.get"
    CREATE_MESSAGE_COLLECTION = "shindig.messageCollection.create"
    MODIFY_MESSAGE_COLLECTION = "shindig.messageCollection.modify"
    DELETE_MESSAGE_COLLECTION = "shindig.messageCollection.delete"
    GET_MESSAGES = "shindig.messages.get"
    CREATE_MESSAGE = "shindig.message.create"
    MODIFY_MESSAGE = "shindig.message.modify"
    DELETE_MESSAGES = "shindig.messages.delete"

    # activity streams
    GET_ACTIVITY_ENTRIES = "shindig.activityEntries.get"
    GET_ACTIVITY_ENTRIES_BY_ID = "shindig.activityEntries.byId"
    GET_ACTIVITY_ENTRY = "shindig.activityEntry.get"
    CREATE_ACTIVITY_ENTRY = "shindig.activityEntry.create"
    UPDATE_ACTIVITY_ENTRY = "shindig.activityEntry.update"
    DELETE_ACTIVITY_ENTRIES = "shindig.activityEntries.delete"

    # albums
    GET_ALBUM = "shindig.album.get"
    GET_ALBUMS = "shindig.albums.get"
    GET_GROUP_ALBUMS = "shindig.albums.group"
    CREATE_ALBUM = "shindig.album.create"
    UPDATE_ALBUM = "shindig.album.update"
    DELETE_ALBUM = "shindig.album.delete"

    # media items
    GET_MEDIA_ITEM = "shindig.mediaItem.get"
    GET_MEDIA_ITEMS = "shindig.mediaItems.get"
    GET_MEDIA_ITEMS_BY_ID = "shindig.mediaItems.byId"
    GET_GROUP_MEDIA_ITEMS = "shindig.mediaItems.group"
    CREATE_MEDIA_ITEM = "shindig.mediaItem.create"
    UPDATE_MEDIA_ITEM = "shindig.mediaItem.update"
    DELETE_MEDIA_ITEM = "shindig.mediaItem.delete"

    # app data
    GET_APP_DATA = "shindig.appData.get"
    UPDATE_APP_DATA = "shindig.appData.update"
    DELETE_APP_DATA = "shindig.appData.delete"

    # graph algorithms
    GET_FRIENDS_OF_FRIENDS = "graph.friendsOfFriends"
    GET_SHORTEST_PATH = "graph.shortestPath"
    RECOMMEND_GROUP = "graph.recommendGroup"
    RECOMMEND_FRIEND = "graph.recommendFriend"

    # organization
    GET_HIERARCHY_PATH = "organization.hierarchyPath"

    # skills
    GET_SKILL_AUTOCOMPLETION = "skills.autocomplete"
    GET_SKILLS = "skills.get"
    ADD_SKILL = "skills.add"
    REMOVE_SKILL = "skills.remove"

    # process mining
    ADD_PROCESS_CYCLE = "processMining.addCycle"
    GET_PROCESS_CYCLES = "processMining.getCycles"
    DELETE_PROCESS_CYCLES = "processMining.deleteCycles"


class Param:
    """Parameter keys understood by the remote procedures."""

    # identity
    USER_ID = "userId"
    USER_ID_LIST = "userIds"
    TARGET_USER_ID = "targetId"
    GROUP_ID = "groupId"
    APP_ID = "appId"
    FIELD_LIST = "fields"

    # collection options
    SORT_FIELD = "sortField"
    SORT_ORDER = "sortOrder"
    FILTER_FIELD = "filterField"
    FILTER_VALUE = "filterValue"
    FILTER_OPERATION = "filterOperation"
    SUBSET_START = "subsetStart"
    SUBSET_SIZE = "subsetSize"

    # object payloads
    PERSON_OBJECT = "person"
    MESSAGE_OBJECT = "message"
    MESSAGE_COLLECTION_OBJECT = "messageCollection"
    ACTIVITY_ENTRY_OBJECT = "activityEntry"
    ALBUM_OBJECT = "album"
    MEDIA_ITEM_OBJECT = "mediaItem"
    PROCESS_CYCLE_OBJECT = "processCycle"
    APP_DATA = "appData"

    # object ids
    MESSAGE_ID = "messageId"
    MESSAGE_ID_LIST = "messageIds"
    MESSAGE_COLLECTION_ID = "messageCollectionId"
    ACTIVITY_ID = "activityId"
    ACTIVITY_ID_LIST = "activityIds"
    ALBUM_ID = "albumId"
    ALBUM_ID_LIST = "albumIds"
    MEDIA_ITEM_ID = "mediaItemId"
    MEDIA_ITEM_ID_LIST = "mediaItemIds"

    # graph algorithms
    FOF_DEPTH = "depth"
    FOF_UNKNOWN = "unknown"
    MIN_FRIENDS_IN_GROUP = "minFriendsInGroup"
    MIN_COMMON_FRIENDS = "minCommonFriends"

    # skills
    SKILL = "skill"
    SKILL_LINKER = "linkerId"
    AUTOCOMPLETE_FRAGMENT = "fragment"

    # process mining
    PROCESS_CYCLE_DOC_TYPE = "docType"

