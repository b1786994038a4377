"""Constructores mínimos de árboles InnerTube para los tests de parsers."""


def text(*parts):
    return {"runs": [p if isinstance(p, dict) else {"text": p} for p in parts]}


def browse_run(label, browse_id, page_type=None):
    endpoint = {"browseId": browse_id}
    if page_type:
        endpoint["browseEndpointContextSupportedConfigs"] = {
            "browseEndpointContextMusicConfig": {"pageType": page_type}
        }
    return {"text": label, "navigationEndpoint": {"browseEndpoint": endpoint}}


def watch_run(label, video_id):
    return {"text": label, "navigationEndpoint": {"watchEndpoint": {"videoId": video_id}}}


def thumbnail(*urls):
    return {"musicThumbnailRenderer": {"thumbnail": {"thumbnails": [{"url": u} for u in urls]}}}


def flex_column(*parts):
    return {"musicResponsiveListItemFlexColumnRenderer": {"text": text(*parts)}}


def fixed_column(*parts):
    return {"musicResponsiveListItemFixedColumnRenderer": {"text": text(*parts)}}


# --- Ítems ---

def two_row_song(video_id, title, artists=(), thumb=None):
    subtitle = ["Song"]
    for name, artist_id in artists:
        subtitle += [" • ", browse_run(name, artist_id)]
    renderer = {
        "title": text(title),
        "subtitle": text(*subtitle),
        "navigationEndpoint": {"watchEndpoint": {"videoId": video_id}},
    }
    if thumb:
        renderer["thumbnailRenderer"] = thumbnail(thumb)
    return {"musicTwoRowItemRenderer": renderer}


def two_row_browse(browse_id, title, subtitle=(), page_type=None, thumb=None):
    endpoint = browse_run(title, browse_id, page_type)["navigationEndpoint"]
    renderer = {
        "title": text(title),
        "subtitle": text(*subtitle) if subtitle else text(),
        "navigationEndpoint": endpoint,
    }
    if thumb:
        renderer["thumbnailRenderer"] = thumbnail(thumb)
    return {"musicTwoRowItemRenderer": renderer}


def responsive_song(video_id, title, artists=(), album=None, duration=None, thumb=None, menu=None):
    byline = []
    for name, artist_id in artists:
        if byline:
            byline.append(", ")
        byline.append(browse_run(name, artist_id) if artist_id else name)
    columns = [flex_column(title), flex_column(*byline) if byline else flex_column()]
    if album:
        columns.append(flex_column(browse_run(album[0], album[1])))
    renderer = {"playlistItemData": {"videoId": video_id}, "flexColumns": columns}
    if duration:
        renderer["fixedColumns"] = [fixed_column(duration)]
    if thumb:
        renderer["thumbnail"] = thumbnail(thumb)
    if menu:
        renderer["menu"] = menu
    return {"musicResponsiveListItemRenderer": renderer}


def responsive_browse(browse_id, title, subtitle=(), page_type=None):
    return {
        "musicResponsiveListItemRenderer": {
            "flexColumns": [flex_column(title), flex_column(*subtitle)],
            "navigationEndpoint": browse_run(title, browse_id, page_type)["navigationEndpoint"],
        }
    }


def multi_row_episode(video_id, title, show=None, duration=None, progress=None, played_text=None):
    renderer = {
        "title": text(title),
        "onTap": {"watchEndpoint": {"videoId": video_id}},
    }
    if show:
        renderer["subtitle"] = text(browse_run(show[0], show[1]))
    if duration:
        renderer["durationText"] = text(duration)
    if progress is not None:
        renderer["playbackProgress"] = {
            "musicPlaybackProgressRenderer": {"playbackProgressPercentage": progress}
        }
    if played_text:
        renderer["playedText"] = text(played_text)
    return {"musicMultiRowListItemRenderer": renderer}


def panel_video(video_id, title=None, byline=(), length=None, thumb_url=None, wrapped=False):
    renderer = {"videoId": video_id}
    if title:
        renderer["title"] = text(title)
    if byline:
        renderer["longBylineText"] = text(*byline)
    if length:
        renderer["lengthText"] = text(length)
    if thumb_url:
        renderer["thumbnail"] = {"thumbnails": [{"url": thumb_url}]}
    item = {"playlistPanelVideoRenderer": renderer}
    if wrapped:
        return {"playlistPanelVideoWrapperRenderer": {"primaryRenderer": item}}
    return item


def continuation_item(token):
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {"continuationCommand": {"token": token}}
        }
    }


def next_continuation(token, key="nextContinuationData"):
    return [{key: {"continuation": token}}]


def library_menu(icon, token):
    return {
        "menuRenderer": {
            "items": [{
                "menuServiceItemRenderer": {
                    "icon": {"iconType": icon},
                    "serviceEndpoint": {"feedbackEndpoint": {"feedbackToken": token}},
                }
            }]
        }
    }


# --- Secciones ---

def carousel(title, items, continuations=None):
    renderer = {
        "header": {"musicCarouselShelfBasicHeaderRenderer": {"title": text(title)}},
        "contents": list(items),
    }
    if continuations:
        renderer["continuations"] = continuations
    return {"musicCarouselShelfRenderer": renderer}


def shelf(title, items, continuations=None, **extra):
    renderer = {"contents": list(items), **extra}
    if title:
        renderer["title"] = text(title)
    if continuations:
        renderer["continuations"] = continuations
    return {"musicShelfRenderer": renderer}


# --- Sobres ---

def section_list(sections, continuations=None):
    renderer = {"contents": list(sections)}
    if continuations:
        renderer["continuations"] = continuations
    return {"sectionListRenderer": renderer}


def single_column(sections, continuations=None, **top):
    return {
        "contents": {
            "singleColumnBrowseResultsRenderer": {
                "tabs": [{"tabRenderer": {"content": section_list(sections, continuations)}}]
            }
        },
        **top,
    }


def two_column(tab_sections=(), secondary_sections=(), **top):
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [{"tabRenderer": {"content": section_list(tab_sections)}}],
                "secondaryContents": section_list(secondary_sections),
            }
        },
        **top,
    }


def search_results(sections):
    return {
        "contents": {
            "tabbedSearchResultsRenderer": {
                "tabs": [{"tabRenderer": {"content": section_list(sections)}}]
            }
        }
    }


def watch_next(contents=None, tabs=None, continuations=None):
    panel = {"contents": list(contents or [])}
    if continuations:
        panel["continuations"] = continuations
    queue_tab = {
        "tabRenderer": {
            "content": {"musicQueueRenderer": {"content": {"playlistPanelRenderer": panel}}}
        }
    }
    return {
        "contents": {
            "singleColumnMusicWatchNextResultsRenderer": {
                "tabbedRenderer": {
                    "watchNextTabbedResultsRenderer": {"tabs": [queue_tab, *(tabs or [])]}
                }
            }
        }
    }


def append_action(items):
    return {
        "onResponseReceivedActions": [
            {"appendContinuationItemsAction": {"continuationItems": list(items)}}
        ]
    }
