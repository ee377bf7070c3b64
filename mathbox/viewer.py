import streamlit.components.v1 as components


def render_formula_preview(svg_string: str, width_px: float, height_px: float, file_stem: str = "formula"):
    """
    Renders the formula SVG in a framed preview with zoom controls and a PNG export button.
    """

    svg_safe = svg_string.replace("`", "\\`")
    frame_height = int(min(max(height_px * 2 + 80, 220), 700))

    html_code = f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <style>
            body {{
                margin: 0;
                padding: 0;
                background-color: white;
                font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
            }}
            .controls {{
                padding: 8px 12px;
                border-bottom: 1px solid #ddd;
                display: flex;
                gap: 8px;
                align-items: center;
            }}
            .btn {{
                background-color: #2196F3;
                border: none;
                color: white;
                padding: 6px 10px;
                font-size: 14px;
                cursor: pointer;
                border-radius: 4px;
            }}
            .btn-grey {{ background-color: #607d8b; }}
            .btn:hover {{ filter: brightness(90%); }}
            .formula-container {{
                display: flex;
                justify-content: center;
                align-items: center;
                overflow: auto;
                background: #f0f2f6;
                height: {frame_height - 50}px;
            }}
            .svg-wrapper {{
                background: white;
                box-shadow: 0 10px 25px rgba(0,0,0,0.1);
                transform-origin: center center;
                transition: transform 0.2s ease;
            }}
            svg {{ display: block; }}
        </style>
    </head>
    <body>
        <div class="controls">
            <button class="btn btn-grey" onclick="zoom(-0.25)">&minus;</button>
            <span id="zoom-label">100%</span>
            <button class="btn btn-grey" onclick="zoom(0.25)">+</button>
            <button class="btn" onclick="downloadPng()">Download PNG</button>
            <span style="color:#888">{int(width_px)} &times; {int(height_px)} px</span>
        </div>
        <div class="formula-container">
            <div class="svg-wrapper" id="wrapper">{svg_safe}</div>
        </div>
        <script>
            let scale = 1.0;
            function zoom(step) {{
                scale = Math.min(4.0, Math.max(0.25, scale + step));
                document.getElementById('wrapper').style.transform = `scale(${{scale}})`;
                document.getElementById('zoom-label').innerText = Math.round(scale * 100) + '%';
            }}

            function downloadPng() {{
                const svgEl = document.querySelector('#wrapper svg');
                const clone = svgEl.cloneNode(true);
                const vb = clone.viewBox.baseVal;
                const scaleFactor = 4;
                const w = vb.width * scaleFactor;
                const h = vb.height * scaleFactor;
                clone.setAttribute('width', w);
                clone.setAttribute('height', h);

                const svgData = new XMLSerializer().serializeToString(clone);
                const img = new Image();
                img.src = "data:image/svg+xml;base64," + btoa(unescape(encodeURIComponent(svgData)));
                img.onload = function() {{
                    const canvas = document.createElement("canvas");
                    canvas.width = w;
                    canvas.height = h;
                    const ctx = canvas.getContext("2d");
                    ctx.fillStyle = "white";
                    ctx.fillRect(0, 0, w, h);
                    ctx.drawImage(img, 0, 0, w, h);

                    const link = document.createElement('a');
                    link.download = '{file_stem}.png';
                    link.href = canvas.toDataURL("image/png");
                    link.click();
                }};
            }}
        </script>
    </body>
    </html>
    """

    components.html(html_code, height=frame_height, scrolling=True)
