"""Static HTML page shell: stylesheet, title bar, and code copy buttons"""

from html import escape
from string import Template


DEFAULT_TITLE = "MarkCard Preview"

_STYLE = """\
    :root{
      --bg:#0f1724;--card:#0b1220;--muted:#94a3b8;--accent:#7c3aed;--text:#e6eef8;
      --gap:16px; --max-width:1000px;
    }
    html,body{height:100%}
    body{margin:0;background:linear-gradient(180deg,#081024 0%,#071022 100%);color:var(--text);font-family:Inter, system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial;line-height:1.4;-webkit-font-smoothing:antialiased}
    .wrap{max-width:var(--max-width);margin:24px auto;padding:16px;box-sizing:border-box}
    .card{background:linear-gradient(180deg, rgba(255,255,255,0.02), rgba(255,255,255,0.01));border:1px solid rgba(255,255,255,0.04);border-radius:12px;padding:18px;margin:12px 0;box-shadow:0 6px 20px rgba(2,6,23,0.6)}
    h1{font-size:1.6rem;margin:.25rem 0}
    h2{font-size:1.15rem;margin:.4rem 0}
    h3{font-size:1rem}
    p{color:var(--muted);margin:.6rem 0}
    pre{background:#021026;padding:12px;border-radius:8px;overflow:auto;color:#dbeafe;position:relative;margin:.75rem 0}
    code.inline-code{background:rgba(255,255,255,0.03);padding:2px 6px;border-radius:6px;color:#ffd;font-size:.95em}
    .img-wrap{display:flex;justify-content:center;margin:12px 0}
    .img-wrap img{max-width:100%;height:auto;border-radius:8px;border:1px solid rgba(255,255,255,0.03)}
    table.table{width:100%;border-collapse:collapse;margin:12px 0;font-size:.95rem}
    table.table th, table.table td{border:1px solid rgba(255,255,255,0.04);padding:8px;text-align:left}
    a{color:var(--accent);word-break:break-all}
    ul,ol{color:var(--muted);padding-left:1.2rem}
    .copy-btn{position:absolute;top:8px;right:8px;background:rgba(0,0,0,0.35);border:0;color:var(--text);padding:8px 10px;border-radius:8px;cursor:pointer;font-size:.9rem}
    .copy-btn:active{transform:translateY(1px)}
    .copy-msg{position:absolute;top:8px;right:84px;background:#111827;color:#fff;padding:6px 8px;border-radius:6px;font-size:13px;display:none}

    @media (max-width: 640px) {
      .wrap{margin:16px;padding:12px}
      .card{padding:14px;border-radius:10px}
      h1{font-size:1.25rem}
      h2{font-size:1.05rem}
      pre{font-size:.9rem}
      .copy-btn{padding:10px 12px;right:6px;top:6px;border-radius:10px}
      .copy-msg{right:68px;font-size:12px}
      table.table th, table.table td{padding:6px;font-size:.9rem}
      code.inline-code{font-size:0.92em}
    }

    pre code{white-space:pre-wrap;word-break:break-word}
"""

_SCRIPT = """\
    (function(){
      function flash(msg){
        msg.style.display = 'block';
        setTimeout(function(){ msg.style.display = 'none'; }, 1500);
      }
      function fallbackCopy(text, msg){
        const ta = document.createElement('textarea');
        ta.value = text;
        document.body.appendChild(ta);
        ta.select();
        try { document.execCommand('copy'); flash(msg); } catch (err) {}
        document.body.removeChild(ta);
      }
      document.querySelectorAll('pre > code').forEach(function(code){
        const pre = code.parentNode;
        pre.style.position = 'relative';
        const btn = document.createElement('button');
        btn.className = 'copy-btn';
        btn.type = 'button';
        btn.textContent = 'Copy';
        const msg = document.createElement('div');
        msg.className = 'copy-msg';
        msg.textContent = 'Copied!';
        pre.appendChild(btn);
        pre.appendChild(msg);
        btn.addEventListener('click', async function(){
          try {
            await navigator.clipboard.writeText(code.textContent);
            flash(msg);
          } catch (e) {
            fallbackCopy(code.textContent, msg);
          }
        });
      });
    })();
"""

PAGE_TEMPLATE = Template("""\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>$title</title>
  <style>
$style  </style>
</head>
<body>
  <div class="wrap">
    <h1>$title</h1>
    $body
  </div>
  <script>
$script  </script>
</body>
</html>""")


def build_page(body: str, title: str = DEFAULT_TITLE) -> str:
    """Wrap rendered card HTML in the standalone preview page."""
    return PAGE_TEMPLATE.substitute(
        title=escape(title or DEFAULT_TITLE),
        body=body,
        style=_STYLE,
        script=_SCRIPT,
    )
