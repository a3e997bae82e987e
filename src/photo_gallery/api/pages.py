"""Static HTML pages served alongside the JSON API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
@router.get("/login", response_class=HTMLResponse)
async def login_page() -> HTMLResponse:
    """Login form that posts to the login API."""
    return HTMLResponse(LOGIN_HTML)


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page() -> HTMLResponse:
    """Gallery dashboard that consumes the photo API."""
    return HTMLResponse(DASHBOARD_HTML)


_STYLE = """
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .success { color: #1a7f37; }
      .error { color: #cf222e; }
      #photo-gallery { display: flex; flex-wrap: wrap; gap: 1rem; }
      .photo-card { width: 220px; }
      .photo-card img { width: 100%; height: 160px; object-fit: cover; }
      #downloadModal { display: none; position: fixed; inset: 0;
        background: rgba(0, 0, 0, 0.4); align-items: center; justify-content: center; }
      #downloadModal .content { background: #fff; padding: 1.5rem; }
    </style>
"""

LOGIN_HTML = f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Gallery Login</title>
{_STYLE}
  </head>
  <body>
    <h1>Photo Gallery</h1>
    <form id="loginForm">
      <div class="row"><input id="email" type="email" placeholder="Email" /></div>
      <div class="row">
        <input id="password" type="password" placeholder="Password" />
      </div>
      <button type="submit">Sign in</button>
    </form>
    <p id="message"></p>
    <script>
      document.getElementById('loginForm').addEventListener('submit', async (e) => {{
        e.preventDefault();
        const message = document.getElementById('message');
        const res = await fetch('/api/login', {{
          method: 'POST',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify({{
            email: document.getElementById('email').value,
            password: document.getElementById('password').value
          }})
        }});
        const data = await res.json();
        message.textContent = data.message;
        message.className = res.ok ? 'success' : 'error';
        if (res.ok) window.location.href = '/dashboard';
      }});
    </script>
  </body>
</html>
"""

DASHBOARD_HTML = f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Gallery</title>
{_STYLE}
  </head>
  <body>
    <h1>Photo Gallery</h1>
    <form id="uploadForm" class="row">
      <input id="fileInput" type="file" name="photos" multiple accept="image/*" />
      <button type="submit">Upload</button>
    </form>
    <p id="status"></p>
    <div id="photo-gallery"></div>
    <div id="downloadModal">
      <div class="content">
        <p>Download quality</p>
        <button onclick="downloadPhoto('original')">Original</button>
        <button onclick="downloadPhoto('medium')">Medium</button>
        <button onclick="downloadPhoto('small')">Small</button>
        <button onclick="closeModal()">Cancel</button>
      </div>
    </div>
    <script>
      let currentPublicId = '';
      const statusLine = document.getElementById('status');
      const gallery = document.getElementById('photo-gallery');

      async function loadPhotos() {{
        const res = await fetch('/api/photos');
        const data = await res.json();
        gallery.innerHTML = '';
        if (!res.ok) {{
          statusLine.textContent = data.message;
          statusLine.className = 'error';
          return;
        }}
        if (data.photos.length === 0) {{
          gallery.textContent = 'No photos yet.';
          return;
        }}
        for (const photo of data.photos) {{
          const card = document.createElement('div');
          card.className = 'photo-card';
          const img = document.createElement('img');
          img.src = photo.url;
          img.alt = photo.filename;
          img.loading = 'lazy';
          const download = document.createElement('button');
          download.textContent = 'Download';
          download.onclick = () => openModal(photo.public_id);
          const remove = document.createElement('button');
          remove.textContent = 'Delete';
          remove.onclick = () => deletePhoto(photo.public_id);
          card.append(img, download, remove);
          gallery.appendChild(card);
        }}
      }}

      document.getElementById('uploadForm').addEventListener('submit', async (e) => {{
        e.preventDefault();
        const input = document.getElementById('fileInput');
        if (!input.files.length) {{
          statusLine.textContent = 'Select at least one file.';
          statusLine.className = 'error';
          return;
        }}
        const form = new FormData();
        for (const file of input.files) form.append('photos', file);
        const res = await fetch('/api/upload', {{ method: 'POST', body: form }});
        const data = await res.json();
        statusLine.textContent = data.message;
        statusLine.className = res.ok ? 'success' : 'error';
        input.value = '';
        loadPhotos();
      }});

      function openModal(publicId) {{
        currentPublicId = publicId;
        document.getElementById('downloadModal').style.display = 'flex';
      }}

      function closeModal() {{
        document.getElementById('downloadModal').style.display = 'none';
      }}

      function downloadPhoto(quality) {{
        const id = encodeURIComponent(currentPublicId);
        window.open(`/api/download/${{id}}?quality=${{quality}}`, '_blank');
        closeModal();
      }}

      async function deletePhoto(publicId) {{
        if (!confirm('Delete this photo?')) return;
        const res = await fetch(`/api/photos/${{encodeURIComponent(publicId)}}`, {{
          method: 'DELETE'
        }});
        const data = await res.json();
        statusLine.textContent = data.message;
        statusLine.className = res.ok ? 'success' : 'error';
        loadPhotos();
      }}

      loadPhotos();
    </script>
  </body>
</html>
"""

NOT_FOUND_HTML = f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Page not found</title>
{_STYLE}
  </head>
  <body>
    <h1>Page not found</h1>
    <p><a href="/dashboard">Back to the gallery</a></p>
  </body>
</html>
"""
