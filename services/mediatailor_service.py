"""
MediaTailor client: channels, programs, source locations, VOD and live
sources, playback configurations and prefetch schedules.

MediaTailor is a REST service whose resource names are part of the request
URI, so those members are checked before any endpoint is resolved. A call
missing one returns a MISSING_PARAMETER outcome without touching the network.
"""
from .service_client import ServiceClient


class MediaTailorClient(ServiceClient):
    """Client for MediaTailor operations."""

    SERVICE_NAME = 'mediatailor'
    SIGNING_NAME = 'mediatailor'
    ENDPOINT_PREFIX = 'api.mediatailor'
    SERVICE_CLIENT_NAME = 'MediaTailor'

    OPERATIONS = {
        "ConfigureLogsForPlaybackConfiguration": (),
        "CreateChannel": ("ChannelName",),
        "CreateLiveSource": ("LiveSourceName", "SourceLocationName"),
        "CreatePrefetchSchedule": ("Name", "PlaybackConfigurationName"),
        "CreateProgram": ("ChannelName", "ProgramName"),
        "CreateSourceLocation": ("SourceLocationName",),
        "CreateVodSource": ("SourceLocationName", "VodSourceName"),
        "DeleteChannel": ("ChannelName",),
        "DeleteChannelPolicy": ("ChannelName",),
        "DeleteLiveSource": ("LiveSourceName", "SourceLocationName"),
        "DeletePlaybackConfiguration": ("Name",),
        "DeletePrefetchSchedule": ("Name", "PlaybackConfigurationName"),
        "DeleteProgram": ("ChannelName", "ProgramName"),
        "DeleteSourceLocation": ("SourceLocationName",),
        "DeleteVodSource": ("SourceLocationName", "VodSourceName"),
        "DescribeChannel": ("ChannelName",),
        "DescribeLiveSource": ("LiveSourceName", "SourceLocationName"),
        "DescribeProgram": ("ChannelName", "ProgramName"),
        "DescribeSourceLocation": ("SourceLocationName",),
        "DescribeVodSource": ("SourceLocationName", "VodSourceName"),
        "GetChannelPolicy": ("ChannelName",),
        "GetChannelSchedule": ("ChannelName",),
        "GetPlaybackConfiguration": ("Name",),
        "GetPrefetchSchedule": ("Name", "PlaybackConfigurationName"),
        "ListAlerts": ("ResourceArn",),
        "ListChannels": (),
        "ListLiveSources": ("SourceLocationName",),
        "ListPlaybackConfigurations": (),
        "ListPrefetchSchedules": ("PlaybackConfigurationName",),
        "ListSourceLocations": (),
        "ListTagsForResource": ("ResourceArn",),
        "ListVodSources": ("SourceLocationName",),
        "PutChannelPolicy": ("ChannelName",),
        "PutPlaybackConfiguration": (),
        "StartChannel": ("ChannelName",),
        "StopChannel": ("ChannelName",),
        "TagResource": ("ResourceArn",),
        "UntagResource": ("ResourceArn", "TagKeys"),
        "UpdateChannel": ("ChannelName",),
        "UpdateLiveSource": ("LiveSourceName", "SourceLocationName"),
        "UpdateSourceLocation": ("SourceLocationName",),
        "UpdateVodSource": ("SourceLocationName", "VodSourceName"),
    }
