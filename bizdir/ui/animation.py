"""
Scroll animations (AOS) for the host page. Streamlit components run in an
iframe, so the scripts below act on window.parent.
"""

from __future__ import annotations

import streamlit.components.v1 as components

AOS_VERSION = "2.3.4"

_INIT_SCRIPT = """
<script>
const doc = window.parent.document;
if (!doc.getElementById("aos-css")) {
  const css = doc.createElement("link");
  css.id = "aos-css";
  css.rel = "stylesheet";
  css.href = "https://unpkg.com/aos@%(version)s/dist/aos.css";
  doc.head.appendChild(css);
  const js = doc.createElement("script");
  js.id = "aos-js";
  js.src = "https://unpkg.com/aos@%(version)s/dist/aos.js";
  js.onload = () => window.parent.AOS.init({duration: 800, once: true, offset: 100});
  doc.head.appendChild(js);
}
</script>
"""

_REFRESH_SCRIPT = """
<script>
if (window.parent.AOS) { window.parent.AOS.refresh(); }
</script>
"""


class AosRefresher:
    """AnimationRefresher that injects AOS once and refreshes it per route."""

    def init(self) -> None:
        components.html(_INIT_SCRIPT % {"version": AOS_VERSION}, height=0)

    def refresh(self) -> None:
        components.html(_REFRESH_SCRIPT, height=0)
