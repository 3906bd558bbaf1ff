# wren/graphics/debug/dump.py
from __future__ import annotations

from wren.graphics.frame import RenderFrameInput
from wren.graphics.utils.uniforms import pack_color, pack_mat4


def dump_frame(
    frame: RenderFrameInput,
    header: str = "FRAME DEBUG DUMP",
) -> None:
    """
    Print what a host would upload and draw for this frame.

    Useful for checking vertex counts and buffer sizes without a GPU.
    """

    print("\n" + "=" * 80)
    print(f"{header} (frame {frame.frame_index})")
    print("=" * 80)

    print(f"  Clear color     : {frame.clear_color}")
    print(f"  Draw count      : {len(frame.draws)}")

    total_bytes = 0
    for i, item in enumerate(frame.draws):
        vbytes = len(item.vertex_bytes())
        ubytes = len(pack_color(item.color)) + len(pack_mat4(item.model))
        total_bytes += vbytes + ubytes

        print(f"\n  Draw {i:02d}")
        print(f"    Mode          : {item.mode.value}")
        print(f"    Vertices      : {item.vertex_count}")
        print(f"    Triangles     : {len(item.triangles())}")
        print(f"    Vertex bytes  : {vbytes}")
        print(f"    Color         : {item.color}")

    print(f"\n  Upload total    : {total_bytes} bytes")
    print("=" * 80)
