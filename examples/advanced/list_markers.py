"""Choose how list items are introduced in the plain-text output."""

from llano import ListMarkers, PlainText, RenderConfig

source = "3. three\n4. four\n   - nested"

for policy in ListMarkers:
    plain = PlainText(RenderConfig(list_markers=policy))
    print(f"--- {policy.value}")
    print(plain(source))
